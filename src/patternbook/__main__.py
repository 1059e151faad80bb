import sys

from patternbook.cli.main import main

sys.exit(main())
