"""
Conversion between FIR boundary records and GeoJSON.

Each base record becomes one Feature. Its extensions are folded into the
same Feature as further polygons of a MultiPolygon. Rings are closed on
output (first point repeated) and opened again on input.

Example:
    text = dump_geojson(collection)
    records = load_records(text)
"""

import logging
from decimal import Decimal
from itertools import chain
from pathlib import Path
from typing import List, Union

import simplejson
from pydantic import ValidationError

from .geojson_models import Feature, FeatureCollection, FeatureProperties, MultiPolygon
from ..errors import FIRFormatError, OrphanExtension
from ..models.fir_boundary import FIRBoundary
from ..models.fir_collection import FIRCollection
from ..models.geo_point import GeoPoint
from ..models.validation import ErrorCollector
from ..utils.bounding_box import compute_bounding_box

logger = logging.getLogger(__name__)


def _ring_to_positions(ring: List[GeoPoint]) -> List[List[Decimal]]:
    return [list(point.to_lon_lat()) for point in ring]


class FormatConverter:
    """Bidirectional transform between FIR collections and GeoJSON feature collections."""

    @staticmethod
    def to_geojson(records: FIRCollection) -> FeatureCollection:
        """
        Build a FeatureCollection from records.

        Raises:
            OrphanExtension: if an extension has no base record with its icao
        """
        records = FIRCollection(list(records))
        orphan = records.orphan_extensions().first()
        if orphan is not None:
            raise OrphanExtension(orphan.icao)

        features = []
        for base, extensions in records.grouped():
            members = [base] + extensions
            box = compute_bounding_box(chain.from_iterable(m.boundary_corners for m in members))
            if box.crosses_antimeridian:
                logger.debug(f"{base.icao}: bbox crosses the antimeridian ({box.min_lon} to {box.max_lon})")
            features.append(Feature(
                properties=FeatureProperties(
                    icao=base.icao,
                    is_oceanic=base.is_oceanic,
                    label=list(base.label.to_lon_lat()),
                ),
                bbox=box.to_geojson_bbox(),
                geometry=MultiPolygon(
                    coordinates=[[_ring_to_positions(m.closed_ring())] for m in members]
                ),
            ))
        logger.debug(f"Converted {len(records)} records into {len(features)} features")
        return FeatureCollection(features=features)

    @staticmethod
    def from_geojson(document: FeatureCollection) -> FIRCollection:
        """
        Build records from a FeatureCollection.

        The first polygon of a feature is the base record, every further
        polygon an extension sharing its icao. Bounding boxes are computed
        from the rings.

        Raises:
            CollectedErrors: if points are out of range
            FIRFormatError: if a feature has no polygon or a polygon no ring
        """
        collector = ErrorCollector()
        records: List[FIRBoundary] = []
        sequence_id = 0
        for feature in document.features:
            properties = feature.properties
            polygons = feature.geometry.coordinates
            if not polygons:
                raise FIRFormatError(f"{properties.icao}: feature has no polygon")
            label = collector.attempt(GeoPoint.from_lon_lat, properties.label)

            for index, polygon in enumerate(polygons):
                if not polygon or not polygon[0]:
                    raise FIRFormatError(f"{properties.icao}: polygon {index} has no exterior ring")
                if len(polygon) > 1:
                    logger.warning(f"{properties.icao}: ignoring {len(polygon) - 1} interior rings of polygon {index}")

                errors_before = len(collector)
                corners = [collector.attempt(GeoPoint.from_lon_lat, p) for p in polygon[0]]
                if len(collector) > errors_before or label is None:
                    sequence_id += 1
                    continue
                if len(corners) > 1 and corners[0] == corners[-1]:
                    corners.pop()

                box = compute_bounding_box(corners)
                records.append(FIRBoundary(
                    sequence_id=sequence_id,
                    icao=properties.icao,
                    is_oceanic=properties.is_oceanic,
                    is_extension=index != 0,
                    min_lat=box.min_lat,
                    min_lon=box.min_lon,
                    max_lat=box.max_lat,
                    max_lon=box.max_lon,
                    label=label,
                    boundary_corners=corners,
                ))
                sequence_id += 1
        return collector.result(FIRCollection(records))


def parse_geojson(text: str) -> FeatureCollection:
    """
    Parse GeoJSON text, every number read as an exact decimal.

    Raises:
        FIRFormatError: if the text is not JSON or not a FeatureCollection of FIRs
    """
    try:
        data = simplejson.loads(text, parse_float=Decimal, parse_int=Decimal)
        return FeatureCollection.model_validate(data)
    except simplejson.JSONDecodeError as e:
        raise FIRFormatError(f"invalid JSON: {e}") from e
    except ValidationError as e:
        raise FIRFormatError(f"invalid FIR GeoJSON: {e}") from e


def render_geojson(document: FeatureCollection, indent: int = 2) -> str:
    """Render GeoJSON text, decimals written with their exact digits."""
    data = document.model_dump(by_alias=True, exclude_none=True)
    return simplejson.dumps(data, indent=indent, use_decimal=True)


def load_records(text: str) -> FIRCollection:
    return FormatConverter.from_geojson(parse_geojson(text))


def dump_geojson(records: FIRCollection, indent: int = 2) -> str:
    return render_geojson(FormatConverter.to_geojson(records), indent)


def read_geojson_file(path: Union[str, Path]) -> FeatureCollection:
    logger.info(f"Reading GeoJSON from {path}")
    with open(path, encoding='utf-8') as f:
        return parse_geojson(f.read())


def write_geojson_file(document: FeatureCollection, path: Union[str, Path]) -> None:
    with open(path, 'w', encoding='utf-8') as f:
        f.write(render_geojson(document))
        f.write('\n')
    logger.info(f"Wrote {len(document.features)} features to {path}")
