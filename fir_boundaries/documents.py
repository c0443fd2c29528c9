"""
Loaded boundary documents and file extension dispatch.

A document is either native records (``.dat``) or a GeoJSON feature
collection (``.geojson``/``.json``). Both carry the same boundaries; they
differ in what can be done with them next, so they are kept as two
distinct types rather than one generic wrapper.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import ClassVar, Dict, Union

from .converters.geojson import FormatConverter, read_geojson_file, write_geojson_file
from .converters.geojson_models import FeatureCollection
from .engines import Mode
from .errors import UnsupportedFormatError
from .models.fir_collection import FIRCollection
from .parsers.dat_parser import process_records, read_file, write_file

logger = logging.getLogger(__name__)


class DocumentKind(Enum):
    NATIVE = "native"
    GEOJSON = "geojson"


SUFFIX_KINDS: Dict[str, DocumentKind] = {
    '.dat': DocumentKind.NATIVE,
    '.geojson': DocumentKind.GEOJSON,
    '.json': DocumentKind.GEOJSON,
}


@dataclass
class NativeRecords:
    records: FIRCollection
    kind: ClassVar[DocumentKind] = DocumentKind.NATIVE

    def to_records(self) -> FIRCollection:
        return self.records


@dataclass
class GeoJsonDocument:
    document: FeatureCollection
    kind: ClassVar[DocumentKind] = DocumentKind.GEOJSON

    def to_records(self) -> FIRCollection:
        return FormatConverter.from_geojson(self.document)


Document = Union[NativeRecords, GeoJsonDocument]


def kind_for_path(path: Union[str, Path]) -> DocumentKind:
    """
    Raises:
        UnsupportedFormatError: for an unknown extension
    """
    suffix = Path(path).suffix.lower()
    try:
        return SUFFIX_KINDS[suffix]
    except KeyError:
        raise UnsupportedFormatError(
            f"{path}: unsupported extension {suffix!r}, expected one of {', '.join(SUFFIX_KINDS)}"
        ) from None


def convert(document: Document, kind: DocumentKind) -> Document:
    """Return the document in the requested representation."""
    if document.kind is kind:
        return document
    if kind is DocumentKind.GEOJSON:
        return GeoJsonDocument(FormatConverter.to_geojson(document.to_records()))
    return NativeRecords(document.to_records())


def load_document(path: Union[str, Path], mode: Union[Mode, str] = Mode.STRICT) -> Document:
    """
    Read a document and run the mode checks on its records.

    Raises:
        CollectedErrors: if recoverable errors were found
        FIRParsingError: on the first fatal error
    """
    kind = kind_for_path(path)
    if kind is DocumentKind.NATIVE:
        return NativeRecords(read_file(path, mode))
    records = process_records(GeoJsonDocument(read_geojson_file(path)).to_records(), mode)
    return GeoJsonDocument(FormatConverter.to_geojson(records))


def save_document(document: Document, path: Union[str, Path]) -> Document:
    """
    Write a document, converting it to the representation the path asks for.

    Returns:
        The document as written
    """
    kind = kind_for_path(path)
    document = convert(document, kind)
    logger.info(f"Saving {document.kind.value} document to {path}")
    if isinstance(document, NativeRecords):
        write_file(document.records, path)
    else:
        write_geojson_file(document.document, path)
    return document
