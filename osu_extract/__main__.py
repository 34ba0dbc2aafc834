import sys
from osu_extract.cli import main

sys.exit(main())
