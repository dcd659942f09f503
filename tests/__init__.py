#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Test package for mazepaths.

Puts the repository root on sys.path so the suite also runs from a plain
checkout (e.g., `pytest tests/` without installing the package).
"""

import os
import sys

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)
