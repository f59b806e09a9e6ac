import sys

from nsnake.cli import main

sys.exit(main())
