import sys

from plugboard.cli.main import main

sys.exit(main())
