import sys

from bpsim.main import main

sys.exit(main())
