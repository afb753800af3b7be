import sys

from vindinium.cli import main

sys.exit(main())
