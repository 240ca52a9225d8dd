# ==============================================
# FSF License Freedom Data
# ==============================================
#
# Package Structure:
#
# fsf_freedom/
# ├── sources/      # Find a readable copy of the FSF document
# ├── graph/        # Parse it into a triple index (rdflib)
# ├── extraction/   # Pull free / non-free facts into a table
# ├── resources/    # Bundled copy of the FSF document
# ├── config.py     # Configuration management
# ├── errors.py     # Initialization failures
# ├── log.py        # Logging setup
# └── service.py    # Orchestrator and lookup API
#
# ==============================================

from .errors import FsfDataError, MalformedDocument, SchemaMismatch, SourceUnavailable
from .extraction import ClassificationTable, LicenseFreedom
from .service import FsfFreedomService, InitState, create_service

__version__ = "0.1.0"

__all__ = [
    "ClassificationTable",
    "FsfDataError",
    "FsfFreedomService",
    "InitState",
    "LicenseFreedom",
    "MalformedDocument",
    "SchemaMismatch",
    "SourceUnavailable",
    "create_service",
]
