import sys

from wordladder.cli import main

sys.exit(main())
