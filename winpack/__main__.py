"""Allow `python -m winpack`."""

import sys

from winpack.cli import main

sys.exit(main())
