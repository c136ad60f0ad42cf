"""Allow ``python -m rmdslides``."""

import sys

from rmdslides.cli import main

sys.exit(main())
