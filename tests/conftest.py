"""
Pytest configuration and shared fixtures.
"""
import os
import sys
import pytest

# Add project root to path for imports
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from openpyxl import Workbook

from defect_init.config import reset_settings


DEFECT_HEADERS = [
    "Item ID",
    "Summary",
    "Description",
    "Comments (Click Add Comment before commenting)",
    "Creation Date",
    "Detected in Release",
    "Environment",
]

DEFECT_VALUES = [
    "7883",
    "Crashes on save",
    "Open the editor\nPress save",
    "Stack trace shows <null> reference",
    "2024-01-05",
    "v2.1",
    "staging",
]


@pytest.fixture
def defect_rows():
    """Header row and first data row of a typical tracker export."""
    return [list(DEFECT_HEADERS), list(DEFECT_VALUES)]


@pytest.fixture
def write_xlsx(tmp_path):
    """Write rows into the first sheet of a new workbook and return its path."""
    def _write(rows, name="export.xlsx", extra_sheets=None):
        wb = Workbook()
        ws = wb.active
        ws.title = "Defects"
        for row in rows:
            ws.append(list(row))
        for sheet_name, sheet_rows in (extra_sheets or {}).items():
            other = wb.create_sheet(sheet_name)
            for row in sheet_rows:
                other.append(list(row))
        path = tmp_path / name
        wb.save(path)
        return path

    return _write


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    for key in (
        "DEFECT_BASE_DIR",
        "DOCUMENT_EXTENSION",
        "SCHEMA_REVISION",
        "TITLE_PREFIX",
        "HEADER_PROFILE_PATH",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()
