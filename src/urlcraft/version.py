"""src/urlcraft/version.py

Version information for Urlcraft.
"""

__version__ = "0.1.0"
