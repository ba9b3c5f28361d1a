"""
Trip GPX

Parses GPX uploads into tracks, routes and waypoints and derives
trip statistics (distance, elevation profile, time bounds, key points).
"""

__version__ = "0.1.0"
