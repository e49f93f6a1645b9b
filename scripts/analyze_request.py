from __future__ import annotations

import argparse
import os
import sys

# Ensure skillmatch/ is importable when running as a script.
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from skillmatch.config import settings  # noqa: E402
from skillmatch.schemas.analysis import EXAMPLE_REQUEST  # noqa: E402
from skillmatch.services.analysis_service import ParseError, ValidationError, evaluate_to_text  # noqa: E402


def _read_request(path: str | None, use_example: bool) -> str:
    if use_example:
        return EXAMPLE_REQUEST.model_dump_json(by_alias=True, indent=2)
    if path and path != "-":
        with open(path, encoding="utf-8") as fh:
            return fh.read()
    return sys.stdin.read()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description=(
            "Match a candidate's skills against the target-role skill set. "
            "Reads a JSON request body from FILE (or stdin) and prints the JSON result."
        )
    )
    parser.add_argument("file", nargs="?", default=None, help="Request JSON file ('-' or omitted for stdin)")
    parser.add_argument("--example", action="store_true", help="Analyze the built-in sample request")
    args = parser.parse_args(argv)

    raw = _read_request(args.file, args.example)
    try:
        print(evaluate_to_text(raw, required_skills=settings.required_skills))
    except ParseError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except ValidationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
