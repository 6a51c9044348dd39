"""Value objects used by the address normalizer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from .exceptions import ConfigurationError

DEFAULT_SCOPE_TYPE = "store"

RegionId = Union[str, int, float]


@dataclass(frozen=True)
class Region:
    """A region (state/province) of a country."""

    region_id: RegionId
    code: str


@dataclass(frozen=True)
class CountryInfo:
    """Country data resolved from a two-letter country code.

    An unknown country is represented by ``CountryInfo.empty()``: no ISO-3
    code and no regions.
    """

    iso3_code: Optional[str] = None
    regions: Tuple[Region, ...] = ()

    @classmethod
    def empty(cls) -> "CountryInfo":
        return cls()

    @property
    def is_known(self) -> bool:
        return bool(self.iso3_code)


@dataclass(frozen=True)
class FieldLimits:
    """Maximum lengths the tax provider accepts for each address field."""

    street: int
    city: int
    main_division: int
    postal_code: int
    country: int

    def __post_init__(self) -> None:
        for name in ("street", "city", "main_division", "postal_code", "country"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigurationError(
                    f"Field limit '{name}' must be a non-negative integer, got {value!r}"
                )


@dataclass
class RawAddressInput:
    """Loosely structured address fields, as collected before normalization."""

    street: List[str] = field(default_factory=list)
    city: Optional[str] = None
    country_code: Optional[str] = None
    region: Optional[str] = None
    region_id: Optional[RegionId] = None
    postal_code: Optional[str] = None
    scope_code: Optional[str] = None
    scope_type: Optional[str] = DEFAULT_SCOPE_TYPE


@dataclass(frozen=True)
class NormalizedAddress:
    """Length-bounded address ready to be sent to the tax provider.

    Absent fields are ``None`` (or an empty ``street`` tuple), never empty
    strings.
    """

    street: Tuple[str, ...] = ()
    city: Optional[str] = None
    main_division: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the address keyed the way the tax provider names its fields."""
        payload: Dict[str, Any] = {}
        if self.street:
            payload["streetAddress"] = list(self.street)
        if self.city is not None:
            payload["city"] = self.city
        if self.main_division is not None:
            payload["mainDivision"] = self.main_division
        if self.postal_code is not None:
            payload["postalCode"] = self.postal_code
        if self.country is not None:
            payload["country"] = self.country
        return payload
