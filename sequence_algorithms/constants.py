"""
Global constants used throughout the package
"""

# Index returned when no element (or no adjacent pair) matches
NOT_FOUND = -1
