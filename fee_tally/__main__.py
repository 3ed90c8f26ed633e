import sys

from fee_tally.cli import main

sys.exit(main())
