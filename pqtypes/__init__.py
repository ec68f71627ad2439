"""PostgreSQL value types: integer and string arrays, JSON text, PostGIS geometries and NULL helpers."""

__version__ = "0.1.0"