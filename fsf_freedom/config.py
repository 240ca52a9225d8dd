# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load all configuration from environment variables / .env
#   file. Provides typed config objects to the resolver and
#   the service.
#
# CLASSES:
# --------
# - SourceConfig (dataclass)
#     use_only_local: bool          (default False)
#     remote_url: str               (default DEFAULT_FSF_JSON_URL)
#     local_path: str               (default "resources/licenses-full.json")
#     bundled_resource: str         (default "licenses-full.json")
#     remote_timeout_seconds: float (default 30.0)
#
# - AppConfig (dataclass)
#     sources: SourceConfig
#     document_format: str          (default "json-ld")
#     log_level: str                (default "INFO")
#
# FUNCTION:
# ---------
# - load_config(env_path=None) -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Every call builds a fresh object; callers keep and pass it.
#
# USAGE:
# ------
#   from fsf_freedom.config import load_config
#   config = load_config()
#   print(config.sources.remote_url)
#
# ==============================================

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv


DEFAULT_FSF_JSON_URL = "https://spdx.github.io/fsf-api/licenses-full.json"
DEFAULT_LOCAL_PATH = os.path.join("resources", "licenses-full.json")
DEFAULT_BUNDLED_RESOURCE = "licenses-full.json"


@dataclass
class SourceConfig:
    """Where the FSF license document may be read from."""
    use_only_local: bool = False
    remote_url: str = DEFAULT_FSF_JSON_URL
    local_path: str = DEFAULT_LOCAL_PATH
    bundled_resource: str = DEFAULT_BUNDLED_RESOURCE
    remote_timeout_seconds: float = 30.0


@dataclass
class AppConfig:
    """Main application configuration."""
    sources: SourceConfig = field(default_factory=SourceConfig)
    document_format: str = "json-ld"
    log_level: str = "INFO"


def _parse_bool(value: Optional[str]) -> bool:
    # Only a case-insensitive "true" enables a flag
    return value is not None and value.strip().lower() == "true"


def load_config(env_path: Optional[Union[str, Path]] = None) -> AppConfig:
    """
    Load configuration from environment variables / .env file.

    Args:
        env_path: Optional path to a .env file. Defaults to the .env
                  file in the project root.

    Returns:
        AppConfig: Application configuration

    Raises:
        ValueError: If a numeric setting cannot be parsed
    """
    if env_path is None:
        env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    timeout_raw = os.getenv("FSF_REMOTE_TIMEOUT_SECONDS", "30.0")
    try:
        timeout = float(timeout_raw)
    except ValueError:
        raise ValueError(
            f"FSF_REMOTE_TIMEOUT_SECONDS must be a number, got {timeout_raw!r}"
        )

    sources = SourceConfig(
        use_only_local=_parse_bool(os.getenv("LOCAL_FSF_FREE_JSON")),
        remote_url=os.getenv("FSF_FREE_JSON_URL", DEFAULT_FSF_JSON_URL),
        local_path=os.getenv("FSF_LOCAL_JSON_PATH", DEFAULT_LOCAL_PATH),
        bundled_resource=os.getenv("FSF_BUNDLED_RESOURCE", DEFAULT_BUNDLED_RESOURCE),
        remote_timeout_seconds=timeout,
    )

    return AppConfig(
        sources=sources,
        document_format=os.getenv("FSF_DOCUMENT_FORMAT", "json-ld"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
