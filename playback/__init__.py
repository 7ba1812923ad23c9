"""
Frame precomputation and synchronized multi-stream playback.
"""
