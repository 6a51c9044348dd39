"""Fluent builder collecting raw address fields for the normalizer."""

from __future__ import annotations

from typing import Iterable, Optional, Union

from .models import NormalizedAddress, RawAddressInput, RegionId
from .normalizer import AddressNormalizer


class AddressBuilder:
    """Collect address fields and build a :class:`NormalizedAddress`.

    Example:
        >>> address = (
        ...     AddressBuilder(normalizer)
        ...     .set_street(["123 Main St", ""])
        ...     .set_city("Springfield")
        ...     .set_country_code("US")
        ...     .set_region_id("13")
        ...     .set_postal_code("62704")
        ...     .build()
        ... )
    """

    def __init__(self, normalizer: AddressNormalizer) -> None:
        self._normalizer = normalizer
        self._raw = RawAddressInput()

    @property
    def raw(self) -> RawAddressInput:
        return self._raw

    def set_street(self, street: Union[str, Iterable[Optional[str]], None]) -> "AddressBuilder":
        """Set the street lines; a single string is one line and blank lines are dropped."""
        if street is None:
            street = []
        elif isinstance(street, str):
            street = [street]
        self._raw.street = [line for line in street if line and line.strip()]
        return self

    def set_city(self, city: Optional[str]) -> "AddressBuilder":
        self._raw.city = city
        return self

    def set_country_code(self, country_code: Optional[str]) -> "AddressBuilder":
        """Set the two-letter country code."""
        self._raw.country_code = country_code
        return self

    def set_region(self, region: Optional[str]) -> "AddressBuilder":
        """Set the free-text region; takes precedence over the region ID."""
        self._raw.region = region
        return self

    def set_region_id(self, region_id: Optional[RegionId]) -> "AddressBuilder":
        self._raw.region_id = region_id
        return self

    def set_postal_code(self, postal_code: Optional[str]) -> "AddressBuilder":
        self._raw.postal_code = postal_code
        return self

    def set_scope_code(self, scope_code: Optional[str]) -> "AddressBuilder":
        self._raw.scope_code = scope_code
        return self

    def set_scope_type(self, scope_type: Optional[str]) -> "AddressBuilder":
        self._raw.scope_type = scope_type
        return self

    def build(self) -> NormalizedAddress:
        """Normalize the collected fields.

        Raises:
            ConfigurationError: When no field limits exist for the scope.
        """
        return self._normalizer.build(self._raw)
