"""
Conflict Scanner
News-driven conflict-of-interest screening for new client intake
"""

__version__ = "1.0.0"
