import sys

from wordora.cli import main

sys.exit(main())
