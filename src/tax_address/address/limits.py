"""Field length limits per configuration scope."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional, Tuple

from ..utils.logging import get_logger
from .exceptions import ConfigurationError
from .models import DEFAULT_SCOPE_TYPE, FieldLimits

if TYPE_CHECKING:
    from ..utils.config import Config

logger = get_logger(__name__)

# Limits of the tax provider's address schema.
DEFAULT_FIELD_LIMITS = FieldLimits(
    street=100,
    city=60,
    main_division=60,
    postal_code=20,
    country=3,
)

ScopeKey = Tuple[Optional[str], Optional[str]]


class ScopedFieldLimitsProvider:
    """Registry of :class:`FieldLimits` keyed by (scope code, scope type)."""

    def __init__(self, default: Optional[FieldLimits] = None) -> None:
        self._limits: Dict[ScopeKey, FieldLimits] = {}
        self._default = default

    @classmethod
    def from_config(cls, config: "Config") -> "ScopedFieldLimitsProvider":
        """Build a provider with the configured scope registered."""
        limits = FieldLimits(
            street=config.get("street_max_length"),
            city=config.get("city_max_length"),
            main_division=config.get("main_division_max_length"),
            postal_code=config.get("postal_code_max_length"),
            country=config.get("country_max_length"),
        )
        provider = cls()
        provider.register(config.get("scope_code"), config.get("scope_type"), limits)
        return provider

    def register(
        self,
        scope_code: Optional[str],
        scope_type: Optional[str],
        limits: FieldLimits,
    ) -> "ScopedFieldLimitsProvider":
        self._limits[(scope_code, scope_type or DEFAULT_SCOPE_TYPE)] = limits
        return self

    def limits_for(self, scope_code: Optional[str], scope_type: Optional[str]) -> FieldLimits:
        key = (scope_code, scope_type or DEFAULT_SCOPE_TYPE)
        limits = self._limits.get(key)
        if limits is not None:
            return limits
        if self._default is not None:
            logger.debug(f"No field limits for scope {key}; using default limits")
            return self._default
        raise ConfigurationError(
            f"No address field limits configured for scope code {scope_code!r} "
            f"and scope type {key[1]!r}"
        )
