import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from defect_init.config import get_settings
from defect_init.errors import DefectInitError, UsageError
from defect_init.logger import set_level
from defect_init.pipeline import resolve_invocation, run
from defect_init.profile_loader import load_profile

USAGE_TEXT = """\
This program takes a defect title as one or two arguments, or a single spreadsheet export.

Example: Defect7134 is a single argument, because there is no space.
Example: Defect 7134 is two arguments, because of the space and the lack of quotes.
Example: "Defect 7134" is a single argument, because the quotes include the space.
Example: export.xlsx reads the first row of the spreadsheet and pre-fills the document.

Run without arguments to be prompted for the title."""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="defect-init",
        description="Create a defect folder with a pre-structured markdown document.",
        epilog=USAGE_TEXT,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "words",
        nargs="*",
        help="Defect title (one or two words) or a spreadsheet path (.xlsx, .xlsm, .xls, .csv).",
    )
    parser.add_argument(
        "--base-dir",
        default=None,
        help="Directory in which the defect folder is created (default: DEFECT_BASE_DIR or cwd).",
    )
    parser.add_argument(
        "--schema-revision",
        choices=["classic", "revised"],
        default=None,
        help="Document layout revision (default: SCHEMA_REVISION, 'revised').",
    )
    parser.add_argument(
        "--extension",
        default=None,
        help="Document file extension (default: DOCUMENT_EXTENSION, '.md').",
    )
    parser.add_argument(
        "--profile-path",
        default=None,
        help="Path to a YAML profile with extra header aliases.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def _normalize_extension(ext: str) -> str:
    ext = ext.strip()
    return ext if ext.startswith(".") else "." + ext


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = get_settings()
    except ValueError as exc:
        print(f"[error] invalid configuration: {exc}", file=sys.stderr)
        return 1
    set_level("DEBUG" if args.verbose else settings.LOG_LEVEL)

    base_dir = args.base_dir or settings.DEFECT_BASE_DIR or os.getcwd()
    extension = _normalize_extension(args.extension) if args.extension else settings.DOCUMENT_EXTENSION
    revision = args.schema_revision or settings.SCHEMA_REVISION

    try:
        invocation = resolve_invocation(args.words)
    except UsageError as exc:
        print(USAGE_TEXT)
        print(f"[error] {exc.message}", file=sys.stderr)
        return 1

    try:
        profile = load_profile(args.profile_path or settings.HEADER_PROFILE_PATH)
        result = run(
            invocation,
            base_dir=base_dir,
            extension=extension,
            revision=revision,
            header_aliases=profile["header_aliases"],
            title_prefix=profile["title_prefix"] or settings.TITLE_PREFIX,
        )
    except DefectInitError as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 1

    print(result.target.document)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
