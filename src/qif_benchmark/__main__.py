import sys

from qif_benchmark.cli import main

sys.exit(main())
