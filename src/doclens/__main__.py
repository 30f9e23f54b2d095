"""Allow running as: python -m doclens"""

import sys

from doclens.cli import main

sys.exit(main())
