"""Errors raised while normalizing addresses."""


class ConfigurationError(Exception):
    """No usable field-limit configuration exists for the requested scope."""
