"""Entry point for ``python -m pychargeview``."""

import sys

from pychargeview.cli import main

sys.exit(main())
