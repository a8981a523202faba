"""
Air Combat
----------
Stage runtime for a side-scrolling arcade shooter.
"""

__version__ = "0.1.0"
