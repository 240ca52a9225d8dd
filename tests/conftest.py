# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests. Nothing here touches the
# network: remote fetches are replaced with fakes, local
# documents are written to tmp_path.
#
# ==============================================

import json
import os

import pytest
import requests

from fsf_freedom.config import AppConfig, SourceConfig


SCHEMA_CONTEXT = {
    "schema": "https://schema.org/",
    "keywords": "schema:keywords",
    "identifier": "schema:identifier",
    "name": "schema:name",
}

CONFIG_ENV_VARS = (
    "LOCAL_FSF_FREE_JSON",
    "FSF_FREE_JSON_URL",
    "FSF_LOCAL_JSON_PATH",
    "FSF_BUNDLED_RESOURCE",
    "FSF_REMOTE_TIMEOUT_SECONDS",
    "FSF_DOCUMENT_FORMAT",
    "LOG_LEVEL",
)


def make_document(*entities) -> bytes:
    """Build a JSON-LD document whose @graph holds the given entities."""
    return json.dumps({"@context": SCHEMA_CONTEXT, "@graph": list(entities)}).encode("utf-8")


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, content: bytes, status_code: int = 200):
        self.content = content
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error")


@pytest.fixture
def sample_document() -> bytes:
    """One free, one non-free and one unrelated license."""
    return make_document(
        {"name": "Expat", "keywords": ["libre", "gpl-3-compatible"], "identifier": ["MIT", "Expat"]},
        {"name": "Bad License", "keywords": "non-free", "identifier": "Bad-1.0"},
        {"name": "Opinion", "keywords": "viewpoint", "identifier": "CC-BY-ND-4.0"},
    )


@pytest.fixture
def local_document(tmp_path, sample_document):
    """Path of a local file holding sample_document."""
    path = tmp_path / "licenses-full.json"
    path.write_bytes(sample_document)
    return path


@pytest.fixture
def make_config(tmp_path):
    """Factory for AppConfig pointing at test locations."""
    def _make(**source_overrides) -> AppConfig:
        values = {
            "use_only_local": False,
            "remote_url": "https://fsf.example.org/licenses-full.json",
            "local_path": str(tmp_path / "missing.json"),
            "bundled_resource": "licenses-full.json",
        }
        values.update(source_overrides)
        return AppConfig(sources=SourceConfig(**values))
    return _make


@pytest.fixture
def clean_env(monkeypatch):
    """Isolated os.environ without any of the package's settings."""
    env = {k: v for k, v in os.environ.items() if k not in CONFIG_ENV_VARS}
    monkeypatch.setattr(os, "environ", env)
    return env
