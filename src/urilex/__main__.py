"""src/urilex/__main__.py"""

import sys

from urilex.cli import main

sys.exit(main())
