import sys

from fsm_engine.cli import main

sys.exit(main())
