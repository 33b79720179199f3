import sys

from reindeer_maze.cli import main

sys.exit(main())
