import sys

from scop.cli import main

sys.exit(main())
