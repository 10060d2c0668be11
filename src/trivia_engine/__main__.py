"""Allow ``python -m trivia_engine``."""

import sys

from .cli import main

sys.exit(main())
