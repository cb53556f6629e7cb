import sys

from minimark.cli import main

sys.exit(main())
