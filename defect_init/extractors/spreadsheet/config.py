"""
Centralised configuration for the spreadsheet extraction path.

The header translation table, sanitisation rules and recognised file
extensions live here so that adding a recognised column is a one-line
change to ``DEFAULT_HEADER_ALIASES``.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Mapping, Tuple

from defect_init.ir import CanonicalField


# ---------------------------------------------------------------------------
# Recognised input files
# ---------------------------------------------------------------------------

EXCEL_EXTENSIONS: FrozenSet[str] = frozenset({".xlsx", ".xlsm", ".xls"})
CSV_EXTENSIONS: FrozenSet[str] = frozenset({".csv"})
SPREADSHEET_EXTENSIONS: FrozenSet[str] = EXCEL_EXTENSIONS | CSV_EXTENSIONS


# ---------------------------------------------------------------------------
# Header translation table: canonical field -> accepted header strings.
# Matching is exact and case-sensitive.
# ---------------------------------------------------------------------------

DEFAULT_HEADER_ALIASES: Mapping[CanonicalField, Tuple[str, ...]] = {
    CanonicalField.TITLE: ("Item ID",),
    CanonicalField.SUMMARY: ("Summary",),
    CanonicalField.DESCRIPTION: ("Description",),
    CanonicalField.COMMENTS: ("Comments (Click Add Comment before commenting)",),
    CanonicalField.CREATION_DATE: ("Creation Date",),
    CanonicalField.DETECTED_IN_RELEASE: ("Detected in Release",),
    CanonicalField.ENVIRONMENT: ("Environment",),
    CanonicalField.CREATOR_FULL_NAME: ("Creator Full Name",),
    CanonicalField.CUSTOMER_DESIRED_RELEASE: ("Customer Desired Release",),
}

DEFAULT_TITLE_PREFIX = "Defect "


# ---------------------------------------------------------------------------
# Sanitisation
# ---------------------------------------------------------------------------

# Free-text fields that may carry markup-like fragments (e.g. "<null>").
SANITIZED_FIELDS: FrozenSet[CanonicalField] = frozenset({
    CanonicalField.DESCRIPTION,
    CanonicalField.COMMENTS,
})

MARKUP_SUBSTITUTIONS: Tuple[Tuple[str, str], ...] = (
    ("<", "`"),
    (">", "`"),
)


def build_header_lookup(
    aliases: Mapping[CanonicalField, Tuple[str, ...]],
) -> Dict[str, CanonicalField]:
    """Invert *aliases* into ``header text -> canonical field``."""
    lookup: Dict[str, CanonicalField] = {}
    for field, headers in aliases.items():
        for header in headers:
            lookup.setdefault(header, field)
    return lookup
