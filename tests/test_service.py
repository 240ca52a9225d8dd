# ==============================================
# Tests for FsfFreedomService
# ==============================================
#
# Covers the initialization state machine, source fallback
# as seen by callers, failure handling and concurrent first
# access.
#
# ==============================================

import threading
import time
import traceback

import pytest
import requests

from conftest import FakeResponse, make_document
from fsf_freedom import (
    FsfFreedomService,
    InitState,
    LicenseFreedom,
    MalformedDocument,
    SchemaMismatch,
    SourceUnavailable,
    create_service,
)
from fsf_freedom.sources import FetchResult, SourceDescriptor, SourceKind


class StaticResolver:
    """Resolver returning fixed bytes and counting calls."""

    def __init__(self, data: bytes, delay: float = 0.0):
        self.data = data
        self.delay = delay
        self.calls = 0

    def resolve(self) -> FetchResult:
        self.calls += 1
        if self.delay:
            time.sleep(self.delay)
        return FetchResult.success(SourceDescriptor(SourceKind.LOCAL_FILE, "static.json"), self.data)


class FailingResolver:
    def __init__(self):
        self.calls = 0

    def resolve(self):
        self.calls += 1
        raise SourceUnavailable("Unable to open input JSON file for FSF license data")


class BrokenResolver:
    """Resolver failing with an error outside the FsfDataError taxonomy."""

    def __init__(self):
        self.calls = 0

    def resolve(self):
        self.calls += 1
        raise RuntimeError("resolver bug")


@pytest.fixture
def no_network(monkeypatch):
    """Every remote fetch fails as if the host were unreachable."""
    calls = []

    def fake_get(url, timeout):
        calls.append(url)
        raise requests.exceptions.ConnectionError(f"cannot reach {url}")

    monkeypatch.setattr(requests, "get", fake_get)
    return calls


# ==============================================
# Lookup Tests
# ==============================================

class TestLookups:

    def test_end_to_end_from_remote(self, monkeypatch, make_config, sample_document):
        monkeypatch.setattr(requests, "get", lambda url, timeout: FakeResponse(sample_document))
        service = FsfFreedomService(make_config())

        assert service.classification_of("MIT") is LicenseFreedom.FREE
        assert service.classification_of("Bad-1.0") is LicenseFreedom.NON_FREE
        assert service.classification_of("Unlisted") is LicenseFreedom.UNKNOWN
        assert service.source.kind is SourceKind.REMOTE

    def test_is_fsf_libre(self, make_config, sample_document):
        service = FsfFreedomService(make_config(), resolver=StaticResolver(sample_document))

        assert service.is_fsf_libre("Expat") is True
        assert service.is_fsf_libre("Bad-1.0") is False
        assert service.is_fsf_libre("CC-BY-ND-4.0") is None

    def test_lazy_initialization(self, make_config, sample_document):
        resolver = StaticResolver(sample_document)
        service = FsfFreedomService(make_config(), resolver=resolver)

        assert service.state is InitState.UNINITIALIZED
        assert service.source is None
        assert resolver.calls == 0

        service.classification_of("MIT")

        assert service.state is InitState.READY

    def test_repeated_lookups_do_not_reload(self, make_config, sample_document):
        resolver = StaticResolver(sample_document)
        service = FsfFreedomService(make_config(), resolver=resolver)

        results = [service.classification_of("MIT") for _ in range(5)]

        assert results == [LicenseFreedom.FREE] * 5
        assert resolver.calls == 1
        assert service.table is service.initialize()

    def test_status(self, make_config, sample_document):
        service = FsfFreedomService(make_config(), resolver=StaticResolver(sample_document))

        assert service.get_status()["state"] == "uninitialized"

        service.initialize()
        status = service.get_status()

        assert status["state"] == "ready"
        assert status["source"] == "local_file:static.json"
        assert status["total"] == 3
        assert status["free"] == 2


# ==============================================
# Source Fallback Tests
# ==============================================

class TestSourceFallback:

    def test_remote_unreachable_uses_local_file(self, no_network, make_config, local_document):
        service = FsfFreedomService(make_config(local_path=str(local_document)))

        assert service.classification_of("MIT") is LicenseFreedom.FREE
        assert service.source.kind is SourceKind.LOCAL_FILE
        assert len(no_network) == 1

    def test_local_only_never_contacts_remote(self, no_network, make_config, local_document):
        service = FsfFreedomService(make_config(use_only_local=True, local_path=str(local_document)))

        assert service.classification_of("Bad-1.0") is LicenseFreedom.NON_FREE
        assert no_network == []

    def test_bundled_document(self, no_network, make_config):
        service = create_service(make_config(use_only_local=True))

        assert service.classification_of("MIT") is LicenseFreedom.FREE
        assert service.classification_of("GPL-3.0-or-later") is LicenseFreedom.FREE
        assert service.classification_of("AGPLv3.0") is LicenseFreedom.FREE
        assert service.classification_of("JSON") is LicenseFreedom.NON_FREE
        assert service.classification_of("CC-BY-ND-4.0") is LicenseFreedom.UNKNOWN
        assert service.classification_of("SSPL-1.0") is LicenseFreedom.UNKNOWN
        assert service.source.kind is SourceKind.BUNDLED

    def test_unparseable_remote_url_falls_back(self, make_config):
        url = "http://" + "a" * 64 + ".com/licenses-full.json"
        service = FsfFreedomService(make_config(remote_url=url))

        assert service.classification_of("MIT") is LicenseFreedom.FREE
        assert service.source.kind is SourceKind.BUNDLED
        assert service.state is InitState.READY

    def test_all_sources_fail(self, no_network, make_config):
        service = FsfFreedomService(make_config(bundled_resource="missing.json"))

        with pytest.raises(SourceUnavailable) as excinfo:
            service.classification_of("MIT")

        assert len(excinfo.value.attempts) == 3
        assert service.state is InitState.FAILED
        assert service.source is None


# ==============================================
# Failure Tests
# ==============================================

class TestFailures:

    def test_failure_is_terminal(self, make_config):
        resolver = FailingResolver()
        service = FsfFreedomService(make_config(), resolver=resolver)

        with pytest.raises(SourceUnavailable) as first:
            service.initialize()
        with pytest.raises(SourceUnavailable) as second:
            service.classification_of("MIT")

        assert first.value is second.value
        assert resolver.calls == 1
        assert service.get_status()["error"] == str(first.value)

    def test_unexpected_error_is_terminal(self, make_config):
        resolver = BrokenResolver()
        service = FsfFreedomService(make_config(), resolver=resolver)

        with pytest.raises(RuntimeError) as first:
            service.initialize()
        with pytest.raises(RuntimeError) as second:
            service.initialize()

        assert first.value is second.value
        assert resolver.calls == 1
        assert service.state is InitState.FAILED
        assert service.get_status()["error"] == "resolver bug"

    def test_repeated_failure_traceback_does_not_grow(self, make_config):
        service = FsfFreedomService(make_config(), resolver=FailingResolver())
        depths = []

        for _ in range(4):
            with pytest.raises(SourceUnavailable) as excinfo:
                service.initialize()
            depths.append(len(traceback.extract_tb(excinfo.value.__traceback__)))

        assert depths[1] == depths[2] == depths[3]
        assert depths[1] <= depths[0] + 1

    def test_malformed_document(self, make_config):
        service = FsfFreedomService(make_config(), resolver=StaticResolver(b"<html>not json</html>"))

        with pytest.raises(MalformedDocument):
            service.classification_of("MIT")
        assert service.state is InitState.FAILED

    def test_schema_mismatch(self, make_config):
        document = make_document({"https://schema.org/name": "No keywords here"})
        service = FsfFreedomService(make_config(), resolver=StaticResolver(document))

        with pytest.raises(SchemaMismatch):
            service.classification_of("MIT")
        assert "total" not in service.get_status()


# ==============================================
# Concurrency Tests
# ==============================================

class TestConcurrentInitialization:

    def test_single_initialization_for_concurrent_callers(self, make_config, sample_document):
        resolver = StaticResolver(sample_document, delay=0.2)
        service = FsfFreedomService(make_config(), resolver=resolver)
        barrier = threading.Barrier(8)
        results = []

        def lookup():
            barrier.wait()
            results.append(service.classification_of("MIT"))

        threads = [threading.Thread(target=lookup) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert resolver.calls == 1
        assert results == [LicenseFreedom.FREE] * 8

    def test_waiters_see_the_same_failure(self, make_config):
        resolver = FailingResolver()
        service = FsfFreedomService(make_config(), resolver=resolver)
        barrier = threading.Barrier(4)
        errors = []

        def lookup():
            barrier.wait()
            try:
                service.classification_of("MIT")
            except SourceUnavailable as e:
                errors.append(e)

        threads = [threading.Thread(target=lookup) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert resolver.calls == 1
        assert len(errors) == 4
        assert all(e is errors[0] for e in errors)
