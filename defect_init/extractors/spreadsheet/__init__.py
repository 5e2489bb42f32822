"""
Spreadsheet extraction subpackage.

Public API:
  - SpreadsheetReader      (file I/O, first sheet → RawRow)
  - FieldExtractor         (RawRow → FieldMapping)
  - DataCleaner            (cell/value normalisation, markup sanitisation)
  - is_spreadsheet_path    (extension check used by the CLI)
"""

from defect_init.extractors.spreadsheet.config import (
    DEFAULT_HEADER_ALIASES,
    DEFAULT_TITLE_PREFIX,
    SPREADSHEET_EXTENSIONS,
)
from defect_init.extractors.spreadsheet.data_cleaner import DataCleaner, sanitize_markup
from defect_init.extractors.spreadsheet.field_extractor import (
    FieldExtractor,
    extract_fields,
    merge_header_aliases,
    require_title,
)
from defect_init.extractors.spreadsheet.reader import (
    SpreadsheetReader,
    is_spreadsheet_path,
    read_raw_row,
)

__all__ = [
    "DEFAULT_HEADER_ALIASES",
    "DEFAULT_TITLE_PREFIX",
    "SPREADSHEET_EXTENSIONS",
    "DataCleaner",
    "sanitize_markup",
    "FieldExtractor",
    "extract_fields",
    "merge_header_aliases",
    "require_title",
    "SpreadsheetReader",
    "is_spreadsheet_path",
    "read_raw_row",
]
