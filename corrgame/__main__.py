import sys

from corrgame.cli import main

sys.exit(main())
