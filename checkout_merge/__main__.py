import sys

from checkout_merge.cli import main

sys.exit(main())
