"""Allow running as python -m yamlsplit."""

import sys

from yamlsplit.cli import main

sys.exit(main())
