"""Allow ``python -m topic_store``."""

import sys

from topic_store.cli import main

sys.exit(main())
