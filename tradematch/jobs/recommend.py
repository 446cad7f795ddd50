"""CLI job that runs the recommendation pipeline and prints the JSON result."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from tradematch.pipeline import recommend

logger = logging.getLogger(__name__)


def read_description(text: Optional[str], file_path: Optional[str]) -> str:
    if file_path:
        return Path(file_path).read_text(encoding="utf-8", errors="replace")
    return text or ""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Recommend tradesmen for a job description")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("description", nargs="?", help="Job description text")
    source.add_argument("--file", dest="file_path", help="Plain-text job sheet to read")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (0 for compact)")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s - %(message)s")
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        description = read_description(args.description, args.file_path)
    except OSError as exc:
        logger.error("Cannot read job sheet %s: %s", args.file_path, exc)
        raise SystemExit(2) from exc

    result = recommend(description)
    json.dump(result, sys.stdout, indent=args.indent or None)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
