"""Allow ``python -m create_webpack_starter``."""

import sys

from create_webpack_starter.scaffold import main

sys.exit(main())
