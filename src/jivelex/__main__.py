import sys

from jivelex.cli import main

sys.exit(main())
