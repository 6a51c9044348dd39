"""Address normalization for submission to a tax calculation provider."""

from __future__ import annotations

import re
from typing import Iterable, Optional

from ..utils.logging import get_logger
from .models import CountryInfo, FieldLimits, NormalizedAddress, RawAddressInput, RegionId
from .protocols import CountryResolver, FieldLimitsProvider, PostalCodeFixer

logger = get_logger(__name__)

_INTEGRAL_ID_RE = re.compile(r"^([+-]?)0*([0-9]+)(?:\.0*)?$")


def truncate(value: str, max_length: int) -> str:
    """Cut ``value`` down to ``max_length`` characters (Unicode code points)."""
    return value[:max_length]


def normalize_region_id(region_id: Optional[RegionId]) -> str:
    """Canonical text form of a region ID.

    Plain integral values compare by number, so ``13``, ``"13"``, ``"013"``,
    ``"+13"`` and ``13.0`` all normalize to ``"13"``. Anything else,
    including exponent forms, ``"NaN"`` and ``"1_000"``, is stripped text.
    """
    if region_id is None:
        return ""
    text = str(region_id).strip()
    match = _INTEGRAL_ID_RE.match(text)
    if not match:
        return text
    sign, digits = match.groups()
    if sign == "-" and digits != "0":
        return f"-{digits}"
    return digits


def find_region_code(country: CountryInfo, region_id: Optional[RegionId]) -> Optional[str]:
    """Return the code of the first region of ``country`` matching ``region_id``."""
    wanted = normalize_region_id(region_id)
    if not wanted:
        return None
    # Linear scan in resolver order; duplicates resolve to the first match.
    for region in country.regions:
        if normalize_region_id(region.region_id) == wanted:
            return region.code
    return None


class AddressNormalizer:
    """Turn raw address input into a provider-ready, length-bounded address.

    Collaborators are supplied at construction:

    - ``country_resolver`` maps the ISO-2 country code to ISO-3 code and regions
    - ``limits_provider`` supplies the field limits for a scope
    - ``postal_fixer`` repairs postal codes before they are truncated

    The normalizer keeps no state between builds, so one instance can serve
    any number of builders.
    """

    def __init__(
        self,
        country_resolver: CountryResolver,
        limits_provider: FieldLimitsProvider,
        postal_fixer: PostalCodeFixer,
    ) -> None:
        self.country_resolver = country_resolver
        self.limits_provider = limits_provider
        self.postal_fixer = postal_fixer

    def build(self, raw: RawAddressInput) -> NormalizedAddress:
        """Normalize ``raw``.

        Args:
            raw: Address fields to normalize. Never modified.

        Returns:
            The normalized address. Empty or unresolvable fields are omitted.

        Raises:
            ConfigurationError: When no field limits exist for the raw scope.
        """
        country = self.country_resolver.resolve(raw.country_code)
        if raw.country_code and not country.is_known:
            logger.debug(f"Country '{raw.country_code}' is unknown; country and region will be omitted")

        main_division = raw.region or self._region_code_by_id(country, raw.region_id)
        limits = self.limits_provider.limits_for(raw.scope_code, raw.scope_type)

        postal_code = None
        if raw.postal_code:
            # Fixing can change the length, so it happens before truncation.
            postal_code = self._bounded(self.postal_fixer.fix(raw.postal_code), limits.postal_code)

        return NormalizedAddress(
            street=self._street_lines(raw.street, limits),
            city=self._bounded(raw.city, limits.city),
            main_division=self._bounded(main_division, limits.main_division),
            postal_code=postal_code,
            country=self._bounded(country.iso3_code, limits.country),
        )

    def _region_code_by_id(self, country: CountryInfo, region_id: Optional[RegionId]) -> Optional[str]:
        if region_id is None or region_id == "":
            return None
        code = find_region_code(country, region_id)
        if code is None:
            logger.debug(f"Region ID {region_id!r} not found among {len(country.regions)} regions")
        return code

    @staticmethod
    def _street_lines(lines: Iterable[str], limits: FieldLimits) -> tuple:
        truncated = (truncate(line, limits.street) for line in lines if line)
        return tuple(line for line in truncated if line)

    @staticmethod
    def _bounded(value: Optional[str], max_length: int) -> Optional[str]:
        if not value:
            return None
        return truncate(value, max_length) or None
