"""
# Date and time values built on exact integer arithmetic.
"""
