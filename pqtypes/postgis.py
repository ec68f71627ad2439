"""PostGIS POINT, BOX2D and POLYGON values in WGS 84 (SRID 4326)."""

from __future__ import annotations

import binascii
import re
import struct
from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

SRID_WGS84 = 4326

_POINT_TYPE = 0x20000001
_POLYGON_TYPE = 0x20000003
_LITTLE_ENDIAN = 1

_POINT_HEADER = struct.Struct("<BII")
_POLYGON_HEADER = struct.Struct("<BIIII")
_COORDS = struct.Struct("<dd")

_FLOAT = r"([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eEpP][+-]?[0-9]+)?|[+-]?(?i:inf|infinity|nan))"
_BOX = re.compile(
    r"BOX\(\s*" + _FLOAT + r"\s+" + _FLOAT + r"\s*,\s*" + _FLOAT + r"\s+" + _FLOAT + r"\s*\)"
)


def _raw_bytes(name: str, value: object) -> bytes:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"{name}.scan: expected bytes, got {type(value).__name__} ({value!r})")


def _decode_hex(name: str, value: object) -> bytes:
    try:
        return binascii.unhexlify(_raw_bytes(name, value))
    except binascii.Error as exc:
        raise ValueError(f"{name}.scan: invalid hex data: {exc}") from exc


@dataclass(frozen=True)
class PostGISPoint:
    """A PostGIS POINT: longitude and latitude."""

    lon: float = 0.0
    lat: float = 0.0

    def value(self) -> bytes:
        """Return the point as EWKT with SRID 4326."""
        return f"SRID=4326;POINT({self.lon:.8f} {self.lat:.8f})".encode("ascii")

    @classmethod
    def scan(cls, value: object) -> "PostGISPoint":
        """Decode hex EWKB with SRID 4326; None gives the zero point."""
        if value is None:
            return cls()
        data = _decode_hex("PostGISPoint", value)
        size = _POINT_HEADER.size + _COORDS.size
        if len(data) < size:
            raise ValueError(
                f"PostGISPoint.scan: need {size} bytes of EWKB, got {len(data)}"
            )
        order, wkb_type, srid = _POINT_HEADER.unpack_from(data)
        lon, lat = _COORDS.unpack_from(data, _POINT_HEADER.size)
        if order != _LITTLE_ENDIAN or wkb_type != _POINT_TYPE or srid != SRID_WGS84:
            raise ValueError(
                "PostGISPoint.scan: unexpected ewkb "
                f"(byte_order={order}, wkb_type={wkb_type:#x}, srid={srid})"
            )
        return cls(lon, lat)


@dataclass(frozen=True)
class PostGISBox2D:
    """A PostGIS BOX2D given by its min and max corners."""

    min: PostGISPoint = field(default_factory=PostGISPoint)
    max: PostGISPoint = field(default_factory=PostGISPoint)

    def value(self) -> bytes:
        """Return the box as WKT."""
        low, high = self.min, self.max
        return (
            f"BOX({low.lon:.8f} {low.lat:.8f},{high.lon:.8f} {high.lat:.8f})"
        ).encode("ascii")

    @classmethod
    def scan(cls, value: object) -> "PostGISBox2D":
        """Parse ``BOX(x1 y1,x2 y2)`` text; None gives the zero box."""
        if value is None:
            return cls()
        raw = _raw_bytes("PostGISBox2D", value)
        text = raw.decode("utf-8", errors="replace")
        match = _BOX.match(text)
        if match is None:
            raise ValueError(f"PostGISBox2D.scan: unexpected data {raw!r}")
        lon1, lat1, lon2, lat2 = (float(g) for g in match.groups())
        return cls(PostGISPoint(lon1, lat1), PostGISPoint(lon2, lat2))


def _is_envelope(points: Tuple[PostGISPoint, ...]) -> bool:
    if len(points) != 5:
        return False
    p0, p1, p2, p3, p4 = points
    return (
        p0 == p4
        and p0.lon == p1.lon
        and p0.lat == p3.lat
        and p1.lat == p2.lat
        and p2.lon == p3.lon
    )


@dataclass(frozen=True)
class PostGISPolygon:
    """A PostGIS POLYGON with a single ring."""

    points: Tuple[PostGISPoint, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))

    def _envelope_points(self) -> Tuple[PostGISPoint, ...]:
        if not _is_envelope(self.points):
            raise ValueError("Not an envelope polygon")
        return self.points

    def min(self) -> PostGISPoint:
        """Return the min corner of a rectangular polygon."""
        return self._envelope_points()[0]

    def max(self) -> PostGISPoint:
        """Return the max corner of a rectangular polygon."""
        return self._envelope_points()[2]

    def value(self) -> bytes:
        """Return the polygon as EWKT with SRID 4326."""
        parts = ",".join(f"{p.lon:.8f} {p.lat:.8f}" for p in self.points)
        return f"SRID=4326;POLYGON(({parts}))".encode("ascii")

    @classmethod
    def scan(cls, value: object) -> "PostGISPolygon":
        """Decode hex EWKB with SRID 4326 and one ring; None gives an empty polygon."""
        if value is None:
            return cls()
        data = _decode_hex("PostGISPolygon", value)
        if len(data) < _POLYGON_HEADER.size:
            raise ValueError(
                f"PostGISPolygon.scan: need {_POLYGON_HEADER.size} bytes of header, "
                f"got {len(data)}"
            )
        order, wkb_type, srid, rings, count = _POLYGON_HEADER.unpack_from(data)
        if (
            order != _LITTLE_ENDIAN
            or wkb_type != _POLYGON_TYPE
            or srid != SRID_WGS84
            or rings != 1
        ):
            raise ValueError(
                "PostGISPolygon.scan: unexpected ewkb "
                f"(byte_order={order}, wkb_type={wkb_type:#x}, srid={srid}, "
                f"rings={rings}, count={count})"
            )
        body = data[_POLYGON_HEADER.size:]
        needed = count * _COORDS.size
        if len(body) < needed:
            raise ValueError(
                f"PostGISPolygon.scan: need {needed} bytes for {count} points, got {len(body)}"
            )
        points = (
            PostGISPoint(lon, lat) for lon, lat in _COORDS.iter_unpack(body[:needed])
        )
        return cls(tuple(points))


def make_envelope(low: PostGISPoint, high: PostGISPoint) -> PostGISPolygon:
    """Return the rectangular polygon spanned by ``low`` and ``high``."""
    return PostGISPolygon(
        (
            low,
            PostGISPoint(low.lon, high.lat),
            high,
            PostGISPoint(high.lon, low.lat),
            low,
        )
    )


def _points(items: Iterable[Tuple[float, float]]) -> Optional[Tuple[PostGISPoint, ...]]:
    return tuple(PostGISPoint(lon, lat) for lon, lat in items)