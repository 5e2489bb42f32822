"""
FieldExtractor: translate a header-labelled data row into a FieldMapping.

Each ``(header, value)`` pair of a :class:`RawRow` is looked up in the
header translation table (exact, case-sensitive). Unknown headers are
ignored so exports with extra columns keep working. Only fields whose
header was found appear in the result; a missing key means "no data
supplied", which the composer treats differently from an empty string.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Sequence

from defect_init.errors import MissingRequiredField
from defect_init.extractors.spreadsheet.config import (
    DEFAULT_HEADER_ALIASES,
    DEFAULT_TITLE_PREFIX,
    SANITIZED_FIELDS,
    build_header_lookup,
)
from defect_init.extractors.spreadsheet.data_cleaner import DataCleaner
from defect_init.ir import CanonicalField, FieldMapping, RawRow
from defect_init.logger import get_logger

logger = get_logger(__name__)


def merge_header_aliases(
    extra: Optional[Mapping[CanonicalField, Sequence[str]]] = None,
    base: Mapping[CanonicalField, Sequence[str]] = DEFAULT_HEADER_ALIASES,
) -> Dict[CanonicalField, tuple]:
    """Extend *base* with *extra* aliases; built-in headers always stay first."""
    merged: Dict[CanonicalField, tuple] = {field: tuple(headers) for field, headers in base.items()}
    for field, headers in (extra or {}).items():
        current = list(merged.get(field, ()))
        for header in headers:
            if header not in current:
                current.append(header)
        merged[field] = tuple(current)
    return merged


class FieldExtractor:
    """
    Stateless mapper from :class:`RawRow` to :data:`FieldMapping`.

    Typical use::

        extractor = FieldExtractor()
        mapping = extractor.extract(raw_row)
        title = require_title(mapping)
    """

    def __init__(
        self,
        header_aliases: Optional[Mapping[CanonicalField, Sequence[str]]] = None,
        title_prefix: str = DEFAULT_TITLE_PREFIX,
    ):
        self._aliases = merge_header_aliases(header_aliases)
        self._lookup = build_header_lookup(self._aliases)
        self._title_prefix = title_prefix

    def match_header(self, header: str) -> Optional[CanonicalField]:
        """Return the canonical field for *header*, or ``None`` if unknown."""
        return self._lookup.get(header)

    def extract(self, raw_row: RawRow) -> FieldMapping:
        mapping: FieldMapping = {}
        for header, value in raw_row.cells:
            field = self.match_header(header)
            if field is None:
                logger.debug("Ignoring unrecognised header %r", header)
                continue
            if field in mapping:
                logger.warning(
                    "Duplicate column for %s (header %r); keeping the first value",
                    field.value, header,
                )
                continue
            if field is CanonicalField.TITLE and not value.strip():
                logger.warning("Ignoring blank %r cell; it cannot name the defect", header)
                continue
            mapping[field] = self._format_value(field, value)
        logger.debug("Extracted fields: %s", [f.value for f in mapping])
        return mapping

    def _format_value(self, field: CanonicalField, value: str) -> str:
        if field is CanonicalField.TITLE:
            return self._title_prefix + value
        if field in SANITIZED_FIELDS:
            return DataCleaner.sanitize_markup(value)
        return value


def extract_fields(
    raw_row: RawRow,
    header_aliases: Optional[Mapping[CanonicalField, Sequence[str]]] = None,
    title_prefix: str = DEFAULT_TITLE_PREFIX,
) -> FieldMapping:
    return FieldExtractor(header_aliases, title_prefix).extract(raw_row)


def require_title(mapping: FieldMapping, raw_row: Optional[RawRow] = None) -> str:
    """Return the Title field or raise :class:`MissingRequiredField`."""
    title = mapping.get(CanonicalField.TITLE)
    if title is None:
        raise MissingRequiredField(
            "Item ID",
            raw_row.headers if raw_row is not None else None,
        )
    return title
