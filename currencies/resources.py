"""
resources.py - Token resource file generation

Offline tooling only; nothing on the runtime path calls this module.
Writes the registry as a JSON list consumed by the contract metadata
generator of the pre-deployed token contracts:

    [
      {
        "name": "Acala",
        "symbol": "ACA",
        "decimals": 12,
        "currencyId": 0
      },
      ...
    ]

Run:
    python -m currencies.resources
    python -m currencies.resources --output path/to/tokens.json -v
"""

from __future__ import annotations
import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from .symbols import SYMBOL_TABLE

logger = logging.getLogger(__name__)

# Location used by the contract metadata generator.
DEFAULT_RESOURCES_PATH = Path("predeploy-contracts/resources/tokens.json")


def token_resources() -> List[Dict[str, Any]]:
    """Return one resource record per registered symbol, in declaration order."""
    return [
        {
            "name": info.display_name,
            "symbol": info.symbol,
            "decimals": info.decimals,
            "currencyId": info.code,
        }
        for info in SYMBOL_TABLE
    ]


def write_token_resources(path: Union[str, Path] = DEFAULT_RESOURCES_PATH) -> Path:
    """
    Write the token resources JSON file, creating parent directories.

    Returns:
        The path written.
    """
    path = Path(path)
    records = token_resources()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")
    logger.info("Wrote %d token resources to %s", len(records), path)
    for record in records:
        logger.debug("  %(currencyId)3d %(symbol)-10s decimals=%(decimals)d", record)
    return path


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = argparse.ArgumentParser(
        prog="python -m currencies.resources",
        description="Generate the token resources JSON file from the symbol registry.",
    )
    p.add_argument(
        "--output", "-o",
        type=Path,
        default=DEFAULT_RESOURCES_PATH,
        help=f"Output path (default: {DEFAULT_RESOURCES_PATH})",
    )
    p.add_argument("--verbose", "-v", action="store_true", help="Log every record written")
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        write_token_resources(args.output)
    except OSError as e:
        logger.error("Could not write %s: %s", args.output, e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
