import sys

from dbschema_tools.cli import main

sys.exit(main())
