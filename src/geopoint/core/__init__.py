"""
Core coordinate parsing, rendering, geodesy and codecs.
"""
