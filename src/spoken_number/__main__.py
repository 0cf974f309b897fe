import sys

from spoken_number.cli import main

sys.exit(main())
