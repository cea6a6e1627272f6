"""Allow running the CLI with ``python -m sd_efficiency``."""

import sys

from sd_efficiency.cli.main import main

sys.exit(main())
