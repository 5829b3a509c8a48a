import sys

from textdiff.main import main

sys.exit(main())
