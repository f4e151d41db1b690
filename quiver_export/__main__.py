import sys

from quiver_export.cli import main

sys.exit(main())
