#!/usr/bin/env python
"""
QIF Parser Benchmark

Builds a synthetic bank ledger, times one parse of it and prints the time
it would take to process one million transactions.

Usage:
    python benchmark.py
    python benchmark.py --count 50000
    python benchmark.py --date-format DD/MM/YYYY --verbose
"""

import sys

sys.path.insert(0, 'src')

from qif_benchmark.cli import main


if __name__ == "__main__":
    sys.exit(main())
