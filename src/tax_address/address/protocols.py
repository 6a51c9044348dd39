"""Collaborator interfaces consumed by the address normalizer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .models import CountryInfo, FieldLimits


@runtime_checkable
class CountryResolver(Protocol):
    """Looks up country data by two-letter code."""

    def resolve(self, country_code: Optional[str]) -> CountryInfo:
        """Resolve a country.

        Args:
            country_code: ISO-2 country code, possibly empty.

        Returns:
            The country's data, or ``CountryInfo.empty()`` when the code is
            unknown. Must not raise for unknown codes.
        """
        ...


@runtime_checkable
class FieldLimitsProvider(Protocol):
    """Supplies the provider's field length limits for a scope."""

    def limits_for(self, scope_code: Optional[str], scope_type: Optional[str]) -> FieldLimits:
        """Return the limits for a scope.

        Raises:
            ConfigurationError: When no configuration exists for the scope.
        """
        ...


@runtime_checkable
class PostalCodeFixer(Protocol):
    """Repairs malformed postal codes. Must not raise."""

    def fix(self, postal_code: str) -> str:
        ...
