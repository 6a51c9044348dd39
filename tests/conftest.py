"""Pytest configuration and fixtures."""

import logging
import sys
from pathlib import Path

import pytest

# Add src to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from tax_address.address import (  # noqa: E402
    AddressNormalizer,
    CountryInfo,
    FieldLimits,
    InMemoryCountryDirectory,
    Region,
    ScopedFieldLimitsProvider,
    ZipCodeFixer,
)


@pytest.fixture
def us_directory():
    """Country directory with a handful of US states and Canada without regions."""
    return InMemoryCountryDirectory({
        "US": CountryInfo(
            iso3_code="USA",
            regions=(
                Region(region_id=12, code="CA"),
                Region(region_id="13", code="IL"),
                Region(region_id=43, code="NY"),
            ),
        ),
        "CA": CountryInfo(iso3_code="CAN"),
    })


@pytest.fixture
def field_limits():
    return FieldLimits(street=50, city=50, main_division=2, postal_code=10, country=3)


@pytest.fixture
def limits_provider(field_limits):
    return ScopedFieldLimitsProvider().register("default", "store", field_limits)


@pytest.fixture
def normalizer(us_directory, limits_provider):
    return AddressNormalizer(us_directory, limits_provider, ZipCodeFixer())


@pytest.fixture
def directory_file(tmp_path):
    """JSON country directory on disk."""
    path = tmp_path / "countries.json"
    path.write_text(
        '{"US": {"iso3_code": "USA", "regions": ['
        '{"id": 12, "code": "CA"}, {"id": 13, "code": "IL"}]}}',
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers bound to streams captured by a finished test."""
    yield
    logger = logging.getLogger("tax_address")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
