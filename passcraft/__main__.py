import sys

from passcraft.cli import main

sys.exit(main())
