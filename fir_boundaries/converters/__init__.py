from .geojson_models import CRS84, Crs, FeatureProperties, MultiPolygon, Feature, FeatureCollection
from .geojson import (
    FormatConverter,
    parse_geojson,
    render_geojson,
    load_records,
    dump_geojson,
    read_geojson_file,
    write_geojson_file,
)

__all__ = [
    'CRS84',
    'Crs',
    'FeatureProperties',
    'MultiPolygon',
    'Feature',
    'FeatureCollection',
    'FormatConverter',
    'parse_geojson',
    'render_geojson',
    'load_records',
    'dump_geojson',
    'read_geojson_file',
    'write_geojson_file',
]
