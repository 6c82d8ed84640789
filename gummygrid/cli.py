"""Command-line entry point.

  python -m gummygrid jarvis                    # markup to stdout
  python -m gummygrid jarvis -o avatars/jarvis  # writes avatars/jarvis.svg
  python -m gummygrid jarvis -c style.json --data-uri
  python -m gummygrid jarvis --ascii
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from pydantic import ValidationError

from gummygrid.engine.errors import GummyGridError
from gummygrid.engine.generator import GummyGrid


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="gummygrid",
        description="Render a deterministic grid avatar for SEED as SVG.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("seed", help="Any string; the same seed always gives the same avatar.")
    p.add_argument("-o", "--output", help="Write to this file (.svg is appended if missing).")
    p.add_argument("-c", "--config", help="JSON file with a partial configuration.")
    p.add_argument(
        "--data-uri",
        action="store_true",
        help="Print a data:image/svg+xml URI instead of markup.",
    )
    p.add_argument(
        "--ascii",
        action="store_true",
        help="Print the fill pattern as text instead of markup.",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr.")
    return p


def load_config(path: str | None) -> dict[str, Any]:
    if path is None:
        return {}
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise GummyGridError(f"{path}: configuration must be a JSON object")
    return data


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    try:
        gg = GummyGrid(load_config(args.config))
        doc = gg.build_from(args.seed)
        if args.ascii:
            print(gg.grid.to_ascii())
        elif args.output:
            path = doc.write_file(args.output)
            print(path)
        elif args.data_uri:
            print(doc.to_url_encoded(with_prefix=True))
        else:
            print(doc.markup)
    except (GummyGridError, ValidationError, json.JSONDecodeError) as e:
        print(f"Config error: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"File error: {e}", file=sys.stderr)
        return 2
    return 0
