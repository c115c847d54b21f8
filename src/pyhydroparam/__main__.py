"""Allow ``python -m pyhydroparam``."""

import sys

from pyhydroparam.cli import main

sys.exit(main())
