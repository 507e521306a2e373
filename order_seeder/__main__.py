import sys

from order_seeder.cli import main

sys.exit(main())
