"""
HTTP API for geopoint.
"""
