# ==============================================
# FsfFreedomService: Orchestrator
# ==============================================
#
# PURPOSE:
#   Ties acquisition, parsing and extraction together and
#   answers "is this license FSF free?" lookups. Callers
#   interact with this class only.
#
# HOW IT CONNECTS THE PIECES:
#
#   ┌──────────────────────────────────────────────┐
#   │               FsfFreedomService              │
#   │                                              │
#   │   SourceResolver.resolve()     RESOLVING     │
#   │        │ bytes                               │
#   │        ▼                                     │
#   │   parse_document()             PARSING       │
#   │        │ TripleIndex                         │
#   │        ▼                                     │
#   │   FactExtractor.extract()      EXTRACTING    │
#   │        │ ClassificationTable                 │
#   │        ▼                                     │
#   │   cached for the service lifetime   READY    │
#   └──────────────────────────────────────────────┘
#
#   Any failure moves to FAILED, including unexpected errors
#   from a custom resolver or extractor. FAILED is terminal:
#   the original error is re-raised to every caller.
#
# CLASS: FsfFreedomService
# ------------------------
#   Constructor:
#   ------------
#   - __init__(config=None, resolver=None, extractor=None)
#       Nothing is fetched until the first lookup.
#
#   Public Methods:
#   ---------------
#   - initialize() -> ClassificationTable
#       Run the pipeline once. Thread-safe; concurrent callers
#       wait for the single running initialization.
#   - classification_of(license_id) -> LicenseFreedom
#   - is_fsf_libre(license_id) -> bool | None
#   - get_status() -> dict
#
# FUNCTION:
# ---------
# - create_service(config=None, configure_logging=False) -> FsfFreedomService
#
# ==============================================

import logging
import threading
from enum import Enum
from types import TracebackType
from typing import Any, Dict, Optional

from fsf_freedom.config import AppConfig, load_config
from fsf_freedom.errors import FsfDataError
from fsf_freedom.extraction import ClassificationTable, FactExtractor, LicenseFreedom
from fsf_freedom.graph import parse_document
from fsf_freedom.log import setup_logging
from fsf_freedom.sources import SourceDescriptor, SourceResolver


logger = logging.getLogger(__name__)


class InitState(Enum):
    UNINITIALIZED = "uninitialized"
    RESOLVING = "resolving"
    PARSING = "parsing"
    EXTRACTING = "extracting"
    READY = "ready"
    FAILED = "failed"


class FsfFreedomService:
    """
    Provides FSF free / libre information for license identifiers.

    The FSF data is loaded lazily on first access and kept for the
    lifetime of the service. After that, lookups are plain reads.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        resolver: Optional[SourceResolver] = None,
        extractor: Optional[FactExtractor] = None
    ):
        """
        Args:
            config: Application configuration. If None, loads from environment.
            resolver: Source resolver. If None, built from config.sources.
            extractor: Fact extractor. If None, uses schema.org defaults.
        """
        self._config = config or load_config()
        self._resolver = resolver or SourceResolver.from_config(self._config.sources)
        self._extractor = extractor or FactExtractor()

        self._lock = threading.Lock()
        self._state = InitState.UNINITIALIZED
        self._table: Optional[ClassificationTable] = None
        self._source: Optional[SourceDescriptor] = None
        self._error: Optional[Exception] = None
        self._error_traceback: Optional[TracebackType] = None

    @property
    def state(self) -> InitState:
        return self._state

    @property
    def source(self) -> Optional[SourceDescriptor]:
        """The source the document was read from, once READY."""
        return self._source

    @property
    def table(self) -> ClassificationTable:
        return self.initialize()

    def initialize(self) -> ClassificationTable:
        """
        Build the classification table if it has not been built yet.

        Returns:
            The cached ClassificationTable

        Raises:
            SourceUnavailable: No source could be read
            MalformedDocument: The document could not be parsed
            SchemaMismatch: The document lacks the expected properties
        """
        table = self._table
        if table is not None:
            return table

        with self._lock:
            if self._table is not None:
                return self._table
            if self._error is not None:
                # traceback from the first failure, not the accumulated one
                raise self._error.with_traceback(self._error_traceback)
            try:
                table = self._build()
            except Exception as e:
                self._state = InitState.FAILED
                self._error = e
                self._error_traceback = e.__traceback__
                if isinstance(e, FsfDataError):
                    logger.error("Unable to load FSF license data: %s", e)
                else:
                    logger.exception("Unexpected error while loading FSF license data")
                raise
            self._state = InitState.READY
            self._table = table
            return table

    def _build(self) -> ClassificationTable:
        self._state = InitState.RESOLVING
        fetched = self._resolver.resolve()

        self._state = InitState.PARSING
        index = parse_document(fetched.data, format=self._config.document_format)

        self._state = InitState.EXTRACTING
        table = self._extractor.extract(index)

        self._source = fetched.descriptor
        return table

    def classification_of(self, license_id: str) -> LicenseFreedom:
        """
        Classify a license identifier.

        Args:
            license_id: License identifier (case-sensitive)

        Returns:
            FREE, NON_FREE, or UNKNOWN if the FSF does not reference it
        """
        return self.initialize().classification_of(license_id)

    def is_fsf_libre(self, license_id: str) -> Optional[bool]:
        """
        True if the FSF describes the license as free / libre, False if it
        describes it as non-free, None if the FSF does not reference it.
        """
        return self.initialize().is_libre(license_id)

    def get_status(self) -> Dict[str, Any]:
        """
        Current service status. Does not trigger initialization.

        Returns:
            Dictionary with state, source and entry counts
        """
        status: Dict[str, Any] = {
            "state": self._state.value,
            "source": self._source.describe() if self._source else None,
            "error": str(self._error) if self._error else None,
        }
        if self._table is not None:
            status.update(self._table.summary())
        return status


def create_service(
    config: Optional[AppConfig] = None,
    configure_logging: bool = False
) -> FsfFreedomService:
    """
    Create a service from configuration.

    Args:
        config: Application configuration. If None, loads from environment.
        configure_logging: Also set up stdout logging at config.log_level

    Returns:
        An uninitialized FsfFreedomService
    """
    config = config or load_config()
    if configure_logging:
        setup_logging(config.log_level)
    return FsfFreedomService(config)
