# ==============================================
# SOURCES: Document acquisition
# ==============================================
#
# This package finds a readable copy of the FSF license
# document: remote URL first, then a local file, then the
# copy bundled with the package.
#
# Modules:
# --------
# - descriptor.py → SourceKind, SourceDescriptor, FetchResult
# - fetchers.py   → one fetch function per SourceKind
# - resolver.py   → ordered fallback over the candidates
#
# ==============================================

from .descriptor import FetchResult, SourceDescriptor, SourceKind
from .fetchers import fetch_bundled, fetch_local_file, fetch_remote
from .resolver import SourceResolver, first_successful

__all__ = [
    "FetchResult",
    "SourceDescriptor",
    "SourceKind",
    "SourceResolver",
    "fetch_bundled",
    "fetch_local_file",
    "fetch_remote",
    "first_successful",
]
