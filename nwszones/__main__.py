import sys

from nwszones.cli import main

sys.exit(main())
