"""Allow ``python -m cacheworker``."""

import sys

from cacheworker.runner import main

sys.exit(main())
