"""Entry point for ``python -m i18nschema``."""

import sys

from i18nschema.cli import main

sys.exit(main())
