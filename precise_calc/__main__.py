import sys

from precise_calc.cli import main

sys.exit(main())
