"""
GMaps auto-order package.

Responsible for:
- Finding active "(GMaps)" campaigns in the lead-recycling registry.
- Skipping campaigns that already have batches in the GMaps tracker.
- Expanding each remaining campaign's cities into category queries.
- Submitting those queries to the dashboard as one or more batches.
"""

from .config import Settings, load_settings
from .errors import AutoOrderError, ConfigError, DashboardError
from .order_flow import run_autoorder

__all__ = [
    "AutoOrderError",
    "ConfigError",
    "DashboardError",
    "Settings",
    "load_settings",
    "run_autoorder",
]
