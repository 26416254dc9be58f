#!/usr/bin/env python3
"""
Wink Attributes - Main entry point for running from a source checkout.
"""

import sys

from html_attributes.main import main

if __name__ == "__main__":
    sys.exit(main())
