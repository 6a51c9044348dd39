"""Address normalization module entry point."""

from .builder import AddressBuilder
from .directory import InMemoryCountryDirectory
from .exceptions import ConfigurationError
from .limits import DEFAULT_FIELD_LIMITS, ScopedFieldLimitsProvider
from .models import CountryInfo, FieldLimits, NormalizedAddress, RawAddressInput, Region
from .normalizer import AddressNormalizer
from .repository import CountryRepository
from .zip_code_fixer import ZipCodeFixer

__all__ = [
    "AddressBuilder",
    "AddressNormalizer",
    "ConfigurationError",
    "CountryInfo",
    "CountryRepository",
    "DEFAULT_FIELD_LIMITS",
    "FieldLimits",
    "InMemoryCountryDirectory",
    "NormalizedAddress",
    "RawAddressInput",
    "Region",
    "ScopedFieldLimitsProvider",
    "ZipCodeFixer",
]
