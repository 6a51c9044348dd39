"""
Tax Address - address normalization for tax calculation providers

Normalizes loosely structured address input (street lines, city, region,
postal code, country) into a length-bounded record that a tax calculation
provider accepts.
"""

__version__ = "0.1.0"

from . import address
from . import utils

__all__ = ["address", "utils"]
