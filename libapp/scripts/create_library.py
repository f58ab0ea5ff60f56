"""
Create a library from the command line. Run from project root:
  python -m libapp.scripts.create_library NAME [--floors N] [--area N]
"""
import argparse
import logging
import sys

from libapp.core.database import SessionLocal
from libapp.services.libraries import create_library

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def _non_negative(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError("must be a non-negative integer")
    return n


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a library.")
    parser.add_argument("name")
    parser.add_argument("--floors", type=_non_negative, default=0, help="Floor count")
    parser.add_argument("--area", type=_non_negative, default=0, help="Floor area")
    args = parser.parse_args(argv)

    if not args.name.strip():
        logger.error("Library name must not be blank.")
        return 1

    db = SessionLocal()
    try:
        library = create_library(db, args.name, floor_count=args.floors, floor_area=args.area)
        logger.info("Created library %r (id=%s).", library.name, library.id)
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
