"""Central configuration loading utilities."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings


class BaseEnvSettings(BaseSettings):
    """Base settings that enforce case sensitivity for env vars."""

    model_config = {"env_file": None, "case_sensitive": True, "extra": "ignore", "populate_by_name": True}


class GenesysCloudSettings(BaseEnvSettings):
    """OAuth client credentials and region of the Genesys Cloud organisation."""

    region: str = Field(..., alias="GENESYSCLOUD_REGION")
    client_id: str = Field(..., alias="GENESYSCLOUD_OAUTHCLIENT_ID")
    client_secret: SecretStr = Field(..., alias="GENESYSCLOUD_OAUTHCLIENT_SECRET")
    request_timeout: float = Field(30.0, alias="GENESYSCLOUD_REQUEST_TIMEOUT_SECONDS")

    @property
    def domain(self) -> str:
        domain = self.region.strip().lower()
        for prefix in ("https://", "http://", "api.", "login."):
            if domain.startswith(prefix):
                domain = domain[len(prefix):]
        return domain.rstrip("/")

    @property
    def api_base_url(self) -> str:
        return f"https://api.{self.domain}"

    @property
    def login_url(self) -> str:
        return f"https://login.{self.domain}/oauth/token"


class JobSettings(BaseEnvSettings):
    """Polling and caching limits for asynchronous analytics jobs."""

    max_attempts: int = Field(10, alias="GENESYSCLOUD_JOB_MAX_ATTEMPTS", ge=1)
    poll_interval_seconds: float = Field(3.0, alias="GENESYSCLOUD_JOB_POLL_INTERVAL_SECONDS", ge=0)
    usage_cache_size: int = Field(500, alias="GENESYSCLOUD_USAGE_CACHE_SIZE", ge=1)
    usage_cache_ttl_seconds: float = Field(300.0, alias="GENESYSCLOUD_USAGE_CACHE_TTL_SECONDS", gt=0)


def _resolve_env_file(explicit: Optional[str] = None) -> Optional[str]:
    """Determine the environment file to load configuration from."""

    candidates: list[Path] = []

    if explicit:
        candidates.append(Path(explicit).expanduser())

    value = os.getenv("GENESYS_CLOUD_MCP_ENV_FILE")
    if value:
        candidates.append(Path(value).expanduser())

    project_root = Path(__file__).resolve().parents[2]
    env_dir = project_root / "env"
    candidates.extend(
        [
            env_dir / "genesys.env",
            env_dir / "genesys.local.env",
            project_root / ".env",
        ]
    )

    for candidate in candidates:
        if candidate.exists():
            return str(candidate)

    return None


@lru_cache(maxsize=1)
def load_genesys_cloud_settings(env_file: Optional[str] = None) -> GenesysCloudSettings:
    return GenesysCloudSettings(_env_file=_resolve_env_file(env_file))


@lru_cache(maxsize=1)
def load_job_settings(env_file: Optional[str] = None) -> JobSettings:
    return JobSettings(_env_file=_resolve_env_file(env_file))


def reset_settings_cache() -> None:
    load_genesys_cloud_settings.cache_clear()  # type: ignore[attr-defined]
    load_job_settings.cache_clear()  # type: ignore[attr-defined]
