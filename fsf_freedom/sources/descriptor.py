# ==============================================
# Source Descriptors and Fetch Results
# ==============================================
#
# PURPOSE:
#   Data classes describing WHERE the license document can be
#   read from and WHAT happened when one read was attempted.
#
# ENUMS:
# ------
# - SourceKind(Enum): REMOTE, LOCAL_FILE, BUNDLED
#
# CLASSES:
# --------
# - SourceDescriptor (frozen dataclass)
#     kind: SourceKind
#     location: str     → URL, filesystem path or resource name
#
# - FetchResult (dataclass)
#     One attempt against one source. Either carries the bytes
#     (ok=True) or the reason the attempt failed (ok=False).
#
# ==============================================

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SourceKind(Enum):
    """
    Kinds of sources the license document can be read from.

    - REMOTE: HTTP(S) URL
    - LOCAL_FILE: path on the local filesystem
    - BUNDLED: resource shipped inside the fsf_freedom package
    """
    REMOTE = "remote"
    LOCAL_FILE = "local_file"
    BUNDLED = "bundled"


@dataclass(frozen=True)
class SourceDescriptor:
    """A single candidate source for the license document."""

    kind: SourceKind
    location: str

    def describe(self) -> str:
        return f"{self.kind.value}:{self.location}"


@dataclass
class FetchResult:
    """
    Outcome of one attempt to read a source.

    Exactly one of `data` and `error` is set.
    """

    descriptor: SourceDescriptor
    data: Optional[bytes] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.data is not None and self.error is None

    @classmethod
    def success(cls, descriptor: SourceDescriptor, data: bytes) -> "FetchResult":
        return cls(descriptor=descriptor, data=data)

    @classmethod
    def failure(cls, descriptor: SourceDescriptor, error: str) -> "FetchResult":
        return cls(descriptor=descriptor, error=error)
