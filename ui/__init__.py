"""
Qt user interface for trajectory playback.
"""
