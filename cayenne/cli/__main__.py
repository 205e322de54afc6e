import sys

from cayenne.cli.main import main

sys.exit(main())
