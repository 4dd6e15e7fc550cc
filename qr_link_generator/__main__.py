import sys

from qr_link_generator.cli import main

sys.exit(main())
