#!/usr/bin/env python3
"""
Validate a dictionary file and print statistics about it.

Usage:
    python scripts/validate_dictionary.py data/words.txt
"""

import argparse
import logging
import sys
import time
from pathlib import Path

# Fix Windows console encoding for Unicode output
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from wordladder.data.loader import WordSet  # noqa: E402 - must be after sys.path modification
from wordladder.errors import ResourceError  # noqa: E402

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)
logger = logging.getLogger(__name__)


def check_file_exists(path: Path) -> bool:
    """Check that the dictionary file exists."""
    print("\n=== Checking Dictionary File ===\n")

    exists = path.exists()
    size_kb = path.stat().st_size / 1024 if exists else 0
    status = f"✓ {path.name}: {size_kb:,.1f} KB" if exists else f"✗ {path.name}: NOT FOUND"
    print(status)
    return exists


def load_and_validate(path: Path) -> bool:
    """Load the dictionary and report what the traversal will see."""
    print("\n=== Loading Dictionary ===\n")

    start_time = time.time()
    try:
        words = WordSet.from_file(path)
    except ResourceError as e:
        print(f"✗ {e.message}")
        return False
    print(f"\nLoad time: {time.time() - start_time:.2f} seconds")

    print("\n=== Dictionary Statistics ===\n")
    stats = words.stats()
    print(f"  total_words: {stats['total_words']:,}")
    for length, count in stats["word_lengths"].items():
        print(f"  words of length {length}: {count:,}")

    ok = True
    if stats["lowercase_entries"]:
        print(f"✗ {stats['lowercase_entries']:,} entries contain lowercase letters (unreachable)")
        ok = False
    if stats["has_empty_entry"]:
        print("✗ dictionary has an empty entry (blank line)")
        ok = False
    if ok:
        print("✓ all entries usable")
    return ok


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("dictionary", type=Path, help="Dictionary file (.txt or .msgpack)")
    args = parser.parse_args()

    if not check_file_exists(args.dictionary):
        return 1
    return 0 if load_and_validate(args.dictionary) else 1


if __name__ == "__main__":
    sys.exit(main())
