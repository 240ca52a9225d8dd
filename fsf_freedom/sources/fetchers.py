# ==============================================
# Fetchers
# ==============================================
#
# PURPOSE:
#   One function per SourceKind. Each reads the whole document
#   and reports the outcome as a FetchResult. Fetchers never
#   raise for an unavailable source; the resolver decides what
#   to do with a failure.
#
# FUNCTIONS:
# ----------
# - fetch_remote(descriptor, timeout=30.0) -> FetchResult
#     GET the URL with requests, raise_for_status, return body.
#
# - fetch_local_file(descriptor) -> FetchResult
#     Read a file. Relative paths resolve against the working
#     directory of the running process.
#
# - fetch_bundled(descriptor, package=BUNDLED_PACKAGE) -> FetchResult
#     Read a resource shipped inside the package.
#
# ==============================================

import logging
from importlib import resources
from pathlib import Path

import requests

from .descriptor import FetchResult, SourceDescriptor


logger = logging.getLogger(__name__)

BUNDLED_PACKAGE = "fsf_freedom.resources"


def _checked(descriptor: SourceDescriptor, data: bytes) -> FetchResult:
    if not data:
        return FetchResult.failure(descriptor, "source is empty")
    return FetchResult.success(descriptor, data)


def fetch_remote(descriptor: SourceDescriptor, timeout: float = 30.0) -> FetchResult:
    """
    Fetch the document over HTTP(S).

    Args:
        descriptor: REMOTE descriptor whose location is the URL
        timeout: Transport timeout in seconds passed to requests

    Returns:
        FetchResult with the response body, or the failure reason
        (malformed URL, connection error, timeout, HTTP error status)
    """
    logger.debug("Requesting %s (timeout=%ss)", descriptor.location, timeout)
    try:
        response = requests.get(descriptor.location, timeout=timeout)
        response.raise_for_status()
    except (requests.exceptions.RequestException, ValueError) as e:
        # urllib3 URL parse errors (e.g. LocationParseError) are ValueErrors
        # that requests does not wrap
        return FetchResult.failure(descriptor, f"{type(e).__name__}: {e}")
    return _checked(descriptor, response.content)


def fetch_local_file(descriptor: SourceDescriptor) -> FetchResult:
    """Read the document from the local filesystem."""
    path = Path(descriptor.location)
    try:
        data = path.read_bytes()
    except OSError as e:
        return FetchResult.failure(descriptor, f"{type(e).__name__}: {e}")
    return _checked(descriptor, data)


def fetch_bundled(descriptor: SourceDescriptor, package: str = BUNDLED_PACKAGE) -> FetchResult:
    """Read the document from a resource bundled with the package."""
    try:
        data = resources.files(package).joinpath(descriptor.location).read_bytes()
    except (OSError, ModuleNotFoundError) as e:
        return FetchResult.failure(descriptor, f"{type(e).__name__}: {e}")
    return _checked(descriptor, data)
