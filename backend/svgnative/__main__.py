"""Entry point for ``python -m svgnative``."""

import sys

from svgnative.cli import main

sys.exit(main())
