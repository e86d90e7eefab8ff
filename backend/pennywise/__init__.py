"""
Pennywise: daily and monthly budget tracking with pacing analytics.
"""

__version__ = "1.0.0"
