"""
Presentation helpers for the demonstration driver.

Modules:
    display - Rich tables of demonstration results
"""
