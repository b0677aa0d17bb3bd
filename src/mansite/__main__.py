import sys

from mansite.cli import main

raise SystemExit(main(sys.argv[1:]))
