"""
Conflict Scanner
Core configuration, logging and errors
"""
