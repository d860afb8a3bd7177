"""
Coordinate helpers, constants and YAML configuration I/O.
"""
