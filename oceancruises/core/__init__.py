"""
Record types: stations, cruise tracks, depth profiles and transects.
"""
