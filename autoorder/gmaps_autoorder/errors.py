class AutoOrderError(Exception):
    """Base class for fatal auto-order errors."""


class ConfigError(AutoOrderError):
    """Required configuration is missing or unusable."""


class DashboardError(AutoOrderError):
    """The dashboard rejected a batch or returned something we cannot use."""
