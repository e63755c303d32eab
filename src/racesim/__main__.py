import sys

from racesim.cli import main

sys.exit(main())
