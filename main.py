#!/usr/bin/env python3
"""
mllwriter - Markup-language-like writers
Main entry point for the document renderer.
"""

from mllwriter.cli import main

if __name__ == "__main__":
    main()
