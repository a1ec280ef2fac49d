"""Allow ``python -m multipart_secrets``."""

import sys

from multipart_secrets.cli import main

sys.exit(main())
