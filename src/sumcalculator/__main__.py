"""
Run with: python -m sumcalculator
"""
import sys

from sumcalculator.main import main

sys.exit(main())
