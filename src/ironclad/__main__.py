import sys

from ironclad.cli import main

sys.exit(main())
