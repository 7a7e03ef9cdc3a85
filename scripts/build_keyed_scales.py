#!/usr/bin/env python3
"""
scripts/build_keyed_scales.py — expand a scale listing into every key.

Usage (from project root):
    python scripts/build_keyed_scales.py data/music.txt > scales.html
    python scripts/build_keyed_scales.py data/music.txt --format csv > scales.csv
"""
import os
import sys

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)

from keyscales.driver import main

if __name__ == "__main__":
    main()
