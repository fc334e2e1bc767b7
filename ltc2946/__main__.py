"""Allow ``python -m ltc2946``."""

import sys

from .cli import main

sys.exit(main())
