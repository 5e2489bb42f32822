"""
SpreadsheetReader: low-level file I/O for defect exports.

Decodes the first sheet of an Excel workbook (openpyxl for ``.xlsx`` /
``.xlsm``, xlrd for legacy ``.xls``) or a CSV file into text rows. Only the
header row and the first data row are ever needed, so reads are capped.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple, Union

import pandas as pd
from openpyxl import load_workbook

from defect_init.errors import DecodeError
from defect_init.extractors.spreadsheet.config import (
    CSV_EXTENSIONS,
    SPREADSHEET_EXTENSIONS,
)
from defect_init.extractors.spreadsheet.data_cleaner import DataCleaner
from defect_init.ir import RawRow
from defect_init.logger import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]


def is_spreadsheet_path(path: PathLike) -> bool:
    """Return ``True`` if *path* has a recognised spreadsheet extension."""
    return Path(str(path)).suffix.lower() in SPREADSHEET_EXTENSIONS


class SpreadsheetReader:
    """
    Read the header row and first data row of a spreadsheet export.

    Any failure inside the decoding libraries surfaces as
    :class:`~defect_init.errors.DecodeError` with the original exception
    chained.
    """

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def read_raw_row(self, file_path: PathLike) -> RawRow:
        """
        Decode *file_path* into a :class:`RawRow`.

        Raises ``DecodeError`` when the sheet is empty or has a header row
        but no data row.
        """
        rows = self.read_rows(file_path, max_rows=2)
        if not rows or not any(rows[0]):
            raise DecodeError(f"Spreadsheet is empty: {file_path}")
        if len(rows) < 2:
            raise DecodeError(f"Spreadsheet has a header row but no data row: {file_path}")
        raw_row = RawRow.from_rows(rows)
        logger.debug("Decoded %d columns from %s", len(raw_row), file_path)
        return raw_row

    def read_rows(self, file_path: PathLike, max_rows: int = 2) -> List[List[str]]:
        """Return up to *max_rows* rows of the first sheet as text cells."""
        path = Path(str(file_path)).expanduser()
        suffix = path.suffix.lower()
        if suffix not in SPREADSHEET_EXTENSIONS:
            raise DecodeError(
                f"Unsupported spreadsheet format '{suffix or path.name}'",
                {"supported": sorted(SPREADSHEET_EXTENSIONS)},
            )
        if not path.is_file():
            raise DecodeError(f"Spreadsheet not found: {path}")

        try:
            df, backend = self._read_df(path, suffix, max_rows)
        except DecodeError:
            raise
        except Exception as exc:
            raise DecodeError(
                f"Could not read spreadsheet {path.name}: {exc}",
                {"error_type": type(exc).__name__},
            ) from exc

        records = list(df.itertuples(index=False, name=None))
        # Header text is kept exactly as stored; only data cells are trimmed.
        rows = [
            DataCleaner.row_to_str(row, strip=(idx > 0))
            for idx, row in enumerate(records)
        ]
        # Drop trailing all-empty rows so "header only" is detected reliably.
        while rows and not any(rows[-1]):
            rows.pop()
        logger.info("Read %d row(s) from %s via %s", len(rows), path.name, backend)
        return rows

    def list_sheet_names(self, file_path: PathLike) -> Tuple[List[str], str]:
        suffix = Path(str(file_path)).suffix.lower()
        if suffix in CSV_EXTENSIONS:
            return [Path(str(file_path)).stem], "csv"
        if suffix == ".xls":
            import xlrd
            wb = xlrd.open_workbook(str(file_path))
            return wb.sheet_names(), "xlrd"
        wb = load_workbook(str(file_path), read_only=True, data_only=True)
        try:
            return list(wb.sheetnames or []), "openpyxl"
        finally:
            wb.close()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _read_df(self, path: Path, suffix: str, max_rows: int) -> Tuple[pd.DataFrame, str]:
        if suffix in CSV_EXTENSIONS:
            try:
                df = pd.read_csv(
                    path, header=None, nrows=max_rows,
                    dtype=str, keep_default_na=False,
                )
            except pd.errors.EmptyDataError as exc:
                raise DecodeError(f"Spreadsheet is empty: {path}") from exc
            return df, "pandas_csv"

        sheet_names, _ = self.list_sheet_names(path)
        if not sheet_names:
            raise DecodeError(f"Workbook has no sheets: {path}")
        logger.debug("Using first sheet %r of %s", sheet_names[0], path.name)
        engine = "xlrd" if suffix == ".xls" else "openpyxl"
        df = pd.read_excel(
            path, sheet_name=0, header=None, nrows=max_rows,
            engine=engine, keep_default_na=False,
        )
        return df, f"pandas_{engine}"


def read_raw_row(file_path: PathLike) -> RawRow:
    return SpreadsheetReader().read_raw_row(file_path)

