"""In-memory country directory, optionally loaded from a JSON file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from .models import CountryInfo, Region


def country_from_document(document: Mapping[str, Any]) -> CountryInfo:
    """Build a :class:`CountryInfo` from a country document.

    Region entries may name their ID ``region_id`` or ``id``. Region order is
    kept as given.
    """
    regions = []
    for entry in document.get("regions") or []:
        region_id = entry.get("region_id", entry.get("id"))
        code = entry.get("code")
        if region_id is None or code is None:
            continue
        regions.append(Region(region_id=region_id, code=str(code)))
    return CountryInfo(iso3_code=document.get("iso3_code") or None, regions=tuple(regions))


class InMemoryCountryDirectory:
    """Country resolver backed by a mapping of ISO-2 code to country data."""

    def __init__(self, countries: Optional[Mapping[str, CountryInfo]] = None) -> None:
        self._countries: Dict[str, CountryInfo] = {}
        for code, info in (countries or {}).items():
            self.add(code, info)

    @classmethod
    def from_documents(cls, documents: Mapping[str, Mapping[str, Any]]) -> "InMemoryCountryDirectory":
        return cls({code: country_from_document(doc) for code, doc in documents.items()})

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "InMemoryCountryDirectory":
        """Load a directory shaped like ``{"US": {"iso3_code": "USA", "regions": [...]}}``."""
        with open(path, "r", encoding="utf-8") as handle:
            documents = json.load(handle)
        return cls.from_documents(documents)

    def add(self, country_code: str, info: CountryInfo) -> None:
        self._countries[country_code.strip().upper()] = info

    def codes(self) -> Iterable[str]:
        return sorted(self._countries)

    def resolve(self, country_code: Optional[str]) -> CountryInfo:
        if not country_code:
            return CountryInfo.empty()
        return self._countries.get(country_code.strip().upper(), CountryInfo.empty())
