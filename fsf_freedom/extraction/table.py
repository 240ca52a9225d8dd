# ==============================================
# ClassificationTable
# ==============================================
#
# PURPOSE:
#   License identifier → FSF classification, built once and
#   read-only afterwards. Identifiers are case-sensitive.
#   Absence of a key means UNKNOWN.
#
# CLASSES:
# --------
# - ClassificationTableBuilder
#     Mutable accumulator used while extracting facts.
#     record() is last-write-wins.
#
# - ClassificationTable
#     Frozen result. Safe to read from many threads.
#
# ==============================================

from types import MappingProxyType
from typing import Dict, ItemsView, Iterator, List, Mapping, Optional

from .freedom import LicenseFreedom


class ClassificationTable:
    """
    Read-only mapping of license identifier to FSF freedom.

    Internally each identifier maps to True (free) or False (non-free).
    """

    def __init__(self, entries: Mapping[str, bool]):
        self._entries = MappingProxyType(dict(entries))

    def classification_of(self, license_id: str) -> LicenseFreedom:
        """
        Look up the classification of a license identifier.

        Args:
            license_id: Identifier as it appears in the FSF data (case-sensitive)

        Returns:
            FREE, NON_FREE, or UNKNOWN when the identifier is not listed
        """
        return LicenseFreedom.from_optional_bool(self._entries.get(license_id))

    def is_libre(self, license_id: str) -> Optional[bool]:
        return self._entries.get(license_id)

    def free_ids(self) -> List[str]:
        return sorted(k for k, v in self._entries.items() if v)

    def non_free_ids(self) -> List[str]:
        return sorted(k for k, v in self._entries.items() if not v)

    def summary(self) -> Dict[str, int]:
        """Counts of free, non-free and total identifiers."""
        free = sum(1 for v in self._entries.values() if v)
        return {
            "free": free,
            "non_free": len(self._entries) - free,
            "total": len(self._entries),
        }

    def items(self) -> ItemsView[str, bool]:
        return self._entries.items()

    def __contains__(self, license_id: object) -> bool:
        return license_id in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        s = self.summary()
        return f"ClassificationTable(free={s['free']}, non_free={s['non_free']})"


class ClassificationTableBuilder:
    """Accumulates classifications before freezing them into a table."""

    def __init__(self):
        self._entries: Dict[str, bool] = {}

    def record(self, license_id: str, is_libre: bool) -> None:
        # Later writes overwrite earlier ones, no conflict detection
        self._entries[license_id] = is_libre

    def __len__(self) -> int:
        return len(self._entries)

    def build(self) -> ClassificationTable:
        return ClassificationTable(self._entries)
