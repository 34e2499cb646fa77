"""
Cron entry point for the GMaps auto-order job.

Usage:
    source .venv/bin/activate
    python scripts/run_gmaps_autoorder.py [--dry-run] [--verbose]

Exit code 0 on a completed run (including zero campaigns found), 1 on any
fatal error, with the error on stderr.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Ensure project root (the repo folder) is on sys.path so `autoorder` can be imported.
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dotenv import load_dotenv

from autoorder.gmaps_autoorder import load_settings, run_autoorder


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Create GMaps scrape batches for new (GMaps) campaigns")
    p.add_argument("--dry-run", action="store_true", help="Plan only; no dashboard calls or tracker writes")
    p.add_argument("--verbose", action="store_true")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    load_dotenv()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )

    try:
        settings = load_settings(dry_run=True if args.dry_run else None)
        run_autoorder(settings)
    except Exception as e:
        print(f"[AutoOrder] FATAL: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
