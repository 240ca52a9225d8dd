# ==============================================
# SourceResolver
# ==============================================
#
# PURPOSE:
#   Produce the bytes of the FSF license document, tolerating
#   the unavailability of any single source.
#
# CANDIDATE ORDER:
# ----------------
#   1. Remote URL        (skipped when use_only_local is set)
#   2. Local file        (relative to the working directory)
#   3. Bundled resource  (shipped inside fsf_freedom.resources)
#
#   Each candidate is tried exactly once. The first one that
#   yields non-empty bytes wins. If all of them fail,
#   SourceUnavailable is raised with every attempt attached.
#
# CLASS: SourceResolver
# ---------------------
#   Constructor:
#   ------------
#   - __init__(candidates, fetchers=None)
#   - from_config(config: SourceConfig)  (classmethod)
#
#   Methods:
#   --------
#   - resolve() -> FetchResult
#
# FUNCTION:
# ---------
# - first_successful(candidates, fetch) -> (FetchResult | None, attempts)
#
# ==============================================

import functools
import logging
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from fsf_freedom.config import SourceConfig
from fsf_freedom.errors import SourceUnavailable
from .descriptor import FetchResult, SourceDescriptor, SourceKind
from .fetchers import fetch_bundled, fetch_local_file, fetch_remote


logger = logging.getLogger(__name__)

Fetcher = Callable[[SourceDescriptor], FetchResult]


def first_successful(
    candidates: Iterable[SourceDescriptor],
    fetch: Fetcher
) -> Tuple[Optional[FetchResult], List[FetchResult]]:
    """
    Try each candidate in order until one succeeds.

    Candidates after the first success are never fetched.

    Args:
        candidates: Sources in priority order
        fetch: Callable performing one attempt

    Returns:
        (winning result or None, every attempt made in order)
    """
    attempts: List[FetchResult] = []
    for descriptor in candidates:
        result = fetch(descriptor)
        attempts.append(result)
        if result.ok:
            return result, attempts
        logger.debug("Source %s failed: %s", descriptor.describe(), result.error)
    return None, attempts


class SourceResolver:
    """
    Resolves the license document from an ordered list of sources.
    """

    def __init__(
        self,
        candidates: List[SourceDescriptor],
        fetchers: Optional[Dict[SourceKind, Fetcher]] = None
    ):
        """
        Args:
            candidates: Sources in priority order
            fetchers: Optional mapping SourceKind → fetch callable.
                      Missing kinds fall back to the default fetchers.
        """
        self.candidates = list(candidates)
        self._fetchers: Dict[SourceKind, Fetcher] = {
            SourceKind.REMOTE: fetch_remote,
            SourceKind.LOCAL_FILE: fetch_local_file,
            SourceKind.BUNDLED: fetch_bundled,
        }
        if fetchers:
            self._fetchers.update(fetchers)

    @classmethod
    def from_config(
        cls,
        config: SourceConfig,
        fetchers: Optional[Dict[SourceKind, Fetcher]] = None
    ) -> "SourceResolver":
        """
        Build the standard remote → local → bundled chain.

        Args:
            config: Source configuration
            fetchers: Optional fetcher overrides

        Returns:
            A SourceResolver honouring use_only_local
        """
        candidates = []
        if not config.use_only_local:
            candidates.append(SourceDescriptor(SourceKind.REMOTE, config.remote_url))
        candidates.append(SourceDescriptor(SourceKind.LOCAL_FILE, config.local_path))
        candidates.append(SourceDescriptor(SourceKind.BUNDLED, config.bundled_resource))

        defaults = {
            SourceKind.REMOTE: functools.partial(
                fetch_remote, timeout=config.remote_timeout_seconds
            ),
        }
        if fetchers:
            defaults.update(fetchers)
        return cls(candidates, defaults)

    def _fetch(self, descriptor: SourceDescriptor) -> FetchResult:
        return self._fetchers[descriptor.kind](descriptor)

    def resolve(self) -> FetchResult:
        """
        Read the document from the first available source.

        Returns:
            The successful FetchResult

        Raises:
            SourceUnavailable: If every candidate failed
        """
        result, attempts = first_successful(self.candidates, self._fetch)
        if result is not None:
            if len(attempts) > 1:
                logger.warning(
                    "FSF license data read from fallback source %s after %d failed attempt(s)",
                    result.descriptor.describe(), len(attempts) - 1
                )
            else:
                logger.info("FSF license data read from %s", result.descriptor.describe())
            return result

        reasons = "; ".join(
            f"{attempt.descriptor.describe()} ({attempt.error})" for attempt in attempts
        )
        raise SourceUnavailable(
            f"Unable to open input JSON file for FSF license data: {reasons or 'no sources configured'}",
            attempts
        )
