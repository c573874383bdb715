import sys

from supersaver_pos.cli.main import main

sys.exit(main())
