import os
import sys
import tempfile
from pathlib import Path

import pandas as pd

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from defect_init.pipeline import create_bare_defect, create_defect_from_spreadsheet


def _build_dataframe() -> pd.DataFrame:
    rows = [
        ["Item ID", "Summary", "Detected in Release", "Creation Date", "Environment",
         "Description", "Comments (Click Add Comment before commenting)", "Unrelated Column"],
        ["4242", "Export hangs", "v3.0", "2024-03-01", "qa",
         "Open report\nClick export", "Timeout after <30s>", "ignored"],
    ]
    return pd.DataFrame(rows)


def main() -> None:
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "export.xlsx")
        _build_dataframe().to_excel(path, index=False, header=False)

        out_dir = os.path.join(tmpdir, "defects")
        result = create_defect_from_spreadsheet(path, out_dir)
        print("spreadsheet:", result.target.document)
        print(result.target.document.read_text(encoding="utf-8"))

        bare = create_bare_defect("Defect 4243", out_dir, revision="classic")
        print("bare:", bare.target.document)
        print(bare.target.document.read_text(encoding="utf-8"))


if __name__ == "__main__":
    main()
