"""Repair of postal codes mangled on their way in."""

from __future__ import annotations

import re

_DIGITS_RE = re.compile(r"^[0-9]+$")
_SPACED_ZIP4_RE = re.compile(r"^([0-9]{5})\s+([0-9]{4})$")


class ZipCodeFixer:
    """Best-effort fixes for US ZIP codes; other postal codes pass through.

    - "2108" -> "02108" (leading zeros dropped by spreadsheets)
    - "021081234" -> "02108-1234"
    - "02108 1234" -> "02108-1234"
    """

    ZIP5_LENGTH = 5
    ZIP9_LENGTH = 9

    def fix(self, postal_code: str) -> str:
        if not postal_code:
            return postal_code
        cleaned = postal_code.strip()

        if _DIGITS_RE.match(cleaned):
            if len(cleaned) < self.ZIP5_LENGTH:
                return cleaned.zfill(self.ZIP5_LENGTH)
            if len(cleaned) == self.ZIP9_LENGTH:
                return f"{cleaned[:5]}-{cleaned[5:]}"
            return cleaned

        match = _SPACED_ZIP4_RE.match(cleaned)
        if match:
            return f"{match.group(1)}-{match.group(2)}"
        return cleaned
