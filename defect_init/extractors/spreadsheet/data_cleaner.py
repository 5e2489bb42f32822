"""
DataCleaner: value normalisation utilities for the spreadsheet path.

Responsibilities:
- Cell-level string conversion (``cell_to_str``)
- Empty-cell detection
- Markup sanitisation for free-text fields
"""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Any, Iterable, List, Tuple

import pandas as pd

from defect_init.extractors.spreadsheet.config import MARKUP_SUBSTITUTIONS


class DataCleaner:
    """Stateless helper that normalises raw cell values."""

    # ----- cell → string ---------------------------------------------------

    @staticmethod
    def cell_to_str(value: Any, strip: bool = True) -> str:
        """
        Convert an arbitrary cell value to a clean string.

        With ``strip=False`` text cells are returned exactly as stored.
        """
        if value is None or pd.isna(value):
            return ""
        if isinstance(value, str):
            return value.strip() if strip else value
        if isinstance(value, bool):
            return str(value)
        if isinstance(value, (datetime, pd.Timestamp)):
            if value.time() == time(0, 0):
                return value.date().isoformat()
            return value.isoformat(sep=" ", timespec="seconds")
        if isinstance(value, date):
            return value.isoformat()
        # Item IDs typed as numbers come back from Excel as floats.
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        # Rich-text objects from openpyxl may expose .plain or .text
        plain_attr = getattr(value, "plain", None)
        if isinstance(plain_attr, str):
            return plain_attr.strip()
        text_attr = getattr(value, "text", None)
        if isinstance(text_attr, str):
            return text_attr.strip()
        text = str(value).strip()
        if text.lower() in {"nan", "none", "nat"}:
            return ""
        return text

    @staticmethod
    def row_to_str(values: Iterable[Any], strip: bool = True) -> List[str]:
        return [DataCleaner.cell_to_str(v, strip=strip) for v in values]

    # ----- sanitisation ----------------------------------------------------

    @staticmethod
    def sanitize_markup(
        text: str,
        substitutions: Tuple[Tuple[str, str], ...] = MARKUP_SUBSTITUTIONS,
    ) -> str:
        """Replace markup delimiters one-for-one so the text stays inert in markdown."""
        for old, new in substitutions:
            text = text.replace(old, new)
        return text


def sanitize_markup(text: str) -> str:
    return DataCleaner.sanitize_markup(text)
