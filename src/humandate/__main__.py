"""Allow ``python -m humandate``."""

import sys

from .cli import main

sys.exit(main())
