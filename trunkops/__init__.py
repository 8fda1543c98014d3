"""
trunkops - trunk-based development workflows on top of git.
"""

__version__ = "0.1.0"
