import sys

from date_parsing.cli import main

sys.exit(main())
