import sys

from gloveflash.cli.app import main


sys.exit(main())
