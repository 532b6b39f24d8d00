import sys

from am2rlauncher.cli import main

sys.exit(main())
