#!/usr/bin/env python3
"""
Word ladder CLI without installing the package.

Usage:
    python scripts/wordchain.py data/words.txt COLD WARM
    python scripts/wordchain.py data/words.txt COLD
"""

from __future__ import annotations

import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from wordladder.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
