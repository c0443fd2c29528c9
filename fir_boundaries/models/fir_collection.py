"""Queryable collection of FIR boundary records."""

from typing import Dict, List, Tuple

import pandas as pd

from .fir_boundary import FIRBoundary
from .queryable_collection import QueryableCollection


class FIRCollection(QueryableCollection[FIRBoundary]):
    """
    Records of one boundary file, in file order.

    Base records are identified by ``(icao, is_oceanic)``. Extension records
    belong to the first base record sharing their icao code.

    Example:
        pacific = collection.oceanic().bases().all()
        for base, extensions in collection.grouped():
            ...
    """

    def bases(self) -> 'FIRCollection':
        return self.filter(lambda f: not f.is_extension)

    def extensions(self) -> 'FIRCollection':
        return self.filter(lambda f: f.is_extension)

    def oceanic(self) -> 'FIRCollection':
        return self.filter(lambda f: f.is_oceanic)

    def for_icao(self, icao: str) -> 'FIRCollection':
        """All records, base and extensions, for an icao code."""
        return self.filter(lambda f: f.icao == icao)

    def extensions_of(self, base: FIRBoundary) -> 'FIRCollection':
        for owner, extensions in self.grouped():
            if owner is base:
                return self.__class__(extensions)
        return self.__class__([])

    def grouped(self) -> List[Tuple[FIRBoundary, List[FIRBoundary]]]:
        """
        Pair every base record with its extensions.

        Returns:
            ``(base, [extensions])`` in base order, extensions in file order.
            Extensions without a base are left out, see ``orphan_extensions``.
        """
        groups: List[Tuple[FIRBoundary, List[FIRBoundary]]] = []
        owners: Dict[str, List[FIRBoundary]] = {}
        for base in self.bases():
            extensions: List[FIRBoundary] = []
            groups.append((base, extensions))
            owners.setdefault(base.icao, extensions)
        for extension in self.extensions():
            if extension.icao in owners:
                owners[extension.icao].append(extension)
        return groups

    def orphan_extensions(self) -> 'FIRCollection':
        base_codes = {f.icao for f in self.bases()}
        return self.filter(lambda f: f.is_extension and f.icao not in base_codes)

    def reordered(self) -> 'FIRCollection':
        """Each base directly followed by its extensions, orphans last."""
        ordered: List[FIRBoundary] = []
        for base, extensions in self.grouped():
            ordered.append(base)
            ordered.extend(extensions)
        ordered.extend(self.orphan_extensions())
        return self.__class__(ordered)

    def to_dat_lines(self) -> List[str]:
        lines: List[str] = []
        for boundary in self:
            lines.extend(boundary.to_dat_lines())
        return lines

    def to_dataframe(self) -> pd.DataFrame:
        """
        One row per record, decimal values kept as ``Decimal`` objects.

        Returns:
            DataFrame indexed by sequence_id
        """
        columns = [
            'sequence_id', 'icao', 'is_oceanic', 'is_extension', 'point_count',
            'min_lat', 'min_lon', 'max_lat', 'max_lon', 'label_lat', 'label_lon',
        ]
        df = pd.DataFrame([f.to_dict() for f in self], columns=columns)
        return df.set_index('sequence_id')
