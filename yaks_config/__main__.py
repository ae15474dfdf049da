import sys

from yaks_config.config.cli import main

sys.exit(main())
