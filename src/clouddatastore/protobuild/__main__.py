"""Binding regeneration for clouddatastore.

Usage:
    python3 -m clouddatastore.protobuild [options] {sync,generate,check}

"""

import sys

from clouddatastore.protobuild import main

if __name__ == "__main__":
    sys.exit(main())
