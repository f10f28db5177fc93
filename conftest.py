"""
Root conftest.py - Sets up Python path for tests.

Lets ``csscolors`` and the shared ``tests`` helpers import from a plain
checkout, without an editable install.
"""
import sys
import os

PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)
