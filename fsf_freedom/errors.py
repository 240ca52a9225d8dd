# ==============================================
# Errors
# ==============================================
#
# Every failure that can abort building the classification
# table derives from FsfDataError. All of them are fatal for
# the service instance that raised them.
#
# - SourceUnavailable  → no candidate source produced bytes
# - MalformedDocument  → bytes are not a parseable graph document
# - SchemaMismatch     → schema.org predicates missing from the graph
#
# ==============================================

from typing import List, Optional


class FsfDataError(Exception):
    """Base class for FSF license data initialization failures."""


class SourceUnavailable(FsfDataError):
    """Raised when every candidate source failed to produce a document."""

    def __init__(self, message: str, attempts: Optional[List] = None):
        super().__init__(message)
        self.attempts = list(attempts or [])


class MalformedDocument(FsfDataError):
    """Raised when the document bytes cannot be parsed as the expected serialization."""


class SchemaMismatch(FsfDataError):
    """Raised when the expected schema.org properties cannot be found in the graph."""
