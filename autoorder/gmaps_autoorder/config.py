"""
Configuration for the GMaps auto-order job.

Fixed knobs live here as module constants. The few values that differ per
deployment (store URLs, dashboard URL, dry run, TLS) are read from the
environment once by load_settings().
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigError

DEFAULT_DASHBOARD_URL = "https://gmaps-dashboard-render.onrender.com"

# Max queries per batch (the dashboard splits at this too)
BATCH_SIZE = 2000

# Pause between parts of one campaign
PART_DELAY_S = 1.0

REQUEST_TIMEOUT_S = 30
CONNECT_TIMEOUT_S = 15

# Registry campaigns whose name carries this marker belong to the GMaps family
CAMPAIGN_MARKER = "(GMaps)"

COUNTY_MARKER = "county"

_TRUTHY = ("1", "true", "yes", "y", "on")


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    recycling_db_url: str
    gmaps_db_url: str
    dashboard_url: str = DEFAULT_DASHBOARD_URL
    dry_run: bool = False
    recycling_db_ssl: bool = True
    gmaps_db_ssl: bool = False


def load_settings(env: Optional[Mapping[str, str]] = None, *, dry_run: Optional[bool] = None) -> Settings:
    """
    Resolve Settings from the environment.

    dry_run, when given, overrides DRY_RUN (used by the --dry-run flag and the
    flow parameter). Raises ConfigError if either store URL is missing.
    """
    env = os.environ if env is None else env

    recycling_url = (env.get("RECYCLING_DB_URL") or "").strip()
    gmaps_url = (env.get("GMAPS_DB_URL") or "").strip()
    if not recycling_url or not gmaps_url:
        raise ConfigError("Missing required env vars: RECYCLING_DB_URL, GMAPS_DB_URL")

    dashboard_url = (env.get("DASHBOARD_URL") or DEFAULT_DASHBOARD_URL).strip().rstrip("/")

    return Settings(
        recycling_db_url=recycling_url,
        gmaps_db_url=gmaps_url,
        dashboard_url=dashboard_url,
        dry_run=_env_bool(env, "DRY_RUN", False) if dry_run is None else bool(dry_run),
        recycling_db_ssl=_env_bool(env, "RECYCLING_DB_SSL", True),
        gmaps_db_ssl=_env_bool(env, "GMAPS_DB_SSL", False),
    )
