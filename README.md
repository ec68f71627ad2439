# pqtypes

Value types for PostgreSQL columns that plain drivers leave as text:

- `Int32Array` and `Int64Array` (in `pqtypes.int_arrays`) for `int[]`
  (compatible with the `intarray` module) and `bigint[]`
- `StringArray` (in `pqtypes.string_array`) for `varchar[]`, with quoting
  and escaping
- `JSONText` (in `pqtypes.json_text`) for raw JSON kept in `varchar`, `text`,
  `json` or `jsonb` columns
- `PostGISPoint`, `PostGISBox2D` and `PostGISPolygon` (in `pqtypes.postgis`)
  for PostGIS geometries, plus `make_envelope` for rectangular polygons
- `null_string`, `null_int32`, `null_int64` and `null_timestamp` (in
  `pqtypes.conversions`), which turn zero values into `None` (SQL `NULL`)

Every type has a `value()` method that produces the bytes to send to the
database and a `scan()` class method that builds the type from what the
database returned.

## Installation

```
pip install pqtypes
```

## Arrays

```python
from pqtypes.int_arrays import Int32Array
from pqtypes.string_array import StringArray

Int32Array([1, 0, -3]).value()          # b"{1,0,-3}"
Int32Array.scan(b"{-3,0,1}")             # Int32Array([-3, 0, 1])
Int32Array([1, 0, -3]).equal_without_order(Int32Array([-3, 0, 1]))  # True

StringArray(["a,b", 'say "hi"']).value()  # b'{"a,b","say \\"hi\\""}'
StringArray.scan('{"abc123, def456",абв}')  # StringArray(['abc123, def456', 'абв'])
```

The arrays are `list` subclasses. `scan()` accepts `bytes` or `str`;
`scan(None)` returns `None`, and `value()` of an empty array is `b"{}"`.
Malformed input raises `ValueError`; an input of the wrong type raises
`TypeError`.

`value()` of an integer array raises `OverflowError` for an element that does
not fit in 32 (or 64) bits. `scan()` accepts any literal in the 64-bit range
and wraps it to the array's width.

`StringArray.value()` always quotes every element; `scan()` reads both quoted
and unquoted elements and backslash escapes.

## JSON

```python
from pqtypes.json_text import JSONText

doc = JSONText.scan(b'{"foo": "bar"}')
doc.value()      # b'{"foo": "bar"}', after checking that it is valid JSON
doc.to_json()    # b'{"foo":"bar"}'
```

`JSONText` is a `bytes` subclass that can also be built from a `str`.
`scan()` stores the value as-is without validation, and `scan(None)` returns
`None`. `value()` returns the bytes unchanged but raises `ValueError` for text
that is not valid JSON, including the empty string. `to_json()` returns a
compact encoding with whitespace outside strings removed and `<`, `>`, `&`,
U+2028 and U+2029 inside strings escaped; it also raises `ValueError` for
invalid JSON. `from_json()` returns a copy of the given data as `JSONText`.

## PostGIS

```python
from pqtypes.postgis import PostGISPoint, PostGISBox2D, make_envelope

PostGISPoint(lon=37.60889, lat=55.821913).value()
# b"SRID=4326;POINT(37.60889000 55.82191300)"

PostGISBox2D.scan(b"BOX(0.125 0.25,0.5 1)")
# PostGISBox2D(min=PostGISPoint(lon=0.125, lat=0.25), max=PostGISPoint(lon=0.5, lat=1.0))

box = make_envelope(PostGISPoint(0.125, 0.25), PostGISPoint(0.5, 1.0))
box.min(), box.max()
```

Points and polygons are read from hex-encoded little-endian EWKB with SRID
4326 (WGS 84) and written as EWKT with the same SRID; polygons must have a
single ring. Boxes are read and written as `BOX(x1 y1,x2 y2)` text. All three
`scan()` methods accept only `bytes`; `scan(None)` gives the zero point, the
zero box or an empty polygon. `PostGISPolygon.min()` and `max()` raise
`ValueError` when the polygon is not a five-point envelope.

## Nullable helpers

```python
from pqtypes.conversions import null_string, null_int32, null_timestamp

null_string("")       # None
null_string("abc")    # "abc"
null_int32(0)         # None
null_timestamp(None)  # None
```

`null_int32` and `null_int64` raise `OverflowError` for values outside their
range; all helpers raise `TypeError` for an argument of the wrong type.

## What this package does not do

It does not connect to a database or register adapters with any driver. You
pass the result of `value()` as a query parameter and feed column values to
`scan()` yourself.

## Running the tests

```
pip install -e ".[test]"
pytest
```