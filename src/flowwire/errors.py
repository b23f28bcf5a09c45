"""flowwire exception hierarchy.

All flowwire-specific exceptions inherit from FlowwireError,
enabling structured error handling and cleaner catch clauses.
"""


class FlowwireError(Exception):
    """Base exception for all flowwire errors."""


class PayloadError(FlowwireError):
    """Raw flow engine payload failed validation."""


class ConfigError(FlowwireError):
    """Invalid or missing configuration."""
