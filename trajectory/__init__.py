"""
Trajectory data: samples, CSV loading, timelines and trail lookup.
"""
