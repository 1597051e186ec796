import sys

from securegen.cli import main

sys.exit(main())
