import sys

from teamgraph.cli import main

sys.exit(main())
