# ==============================================
# LicenseFreedom
# ==============================================
#
# Tri-state answer for a license identifier:
#   FREE      → FSF lists it as free / libre
#   NON_FREE  → FSF lists it as non-free
#   UNKNOWN   → FSF data does not mention it
#
# The table stores an optional boolean per identifier;
# these helpers convert between the two forms.
#
# ==============================================

from enum import Enum
from typing import Optional


FREE_TOKEN = "libre"
NON_FREE_TOKEN = "non-free"


class LicenseFreedom(Enum):
    """Tri-state FSF classification of a license."""
    FREE = "free"
    NON_FREE = "non-free"
    UNKNOWN = "unknown"

    @classmethod
    def from_optional_bool(cls, value: Optional[bool]) -> "LicenseFreedom":
        if value is None:
            return cls.UNKNOWN
        return cls.FREE if value else cls.NON_FREE

    @classmethod
    def from_keyword(cls, keyword: str) -> Optional["LicenseFreedom"]:
        """
        Map an FSF keyword to a classification.

        Args:
            keyword: Lexical value of a schema:keywords literal

        Returns:
            FREE for "libre", NON_FREE for "non-free", None for anything else
        """
        if keyword == FREE_TOKEN:
            return cls.FREE
        if keyword == NON_FREE_TOKEN:
            return cls.NON_FREE
        return None

    def as_optional_bool(self) -> Optional[bool]:
        if self is LicenseFreedom.UNKNOWN:
            return None
        return self is LicenseFreedom.FREE
