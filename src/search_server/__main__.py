import sys

from search_server.cli import main

sys.exit(main())
