import sys

from huffv.cli import main

sys.exit(main())
