"""
Run with: python -m binaryconverter
"""
import sys

from binaryconverter.main import main

if __name__ == "__main__":
    sys.exit(main())
