"""
Canvas widgets for trajectory playback.
"""
from ui.canvases.stream_view import StreamView
from ui.canvases.distribution import DistributionCanvas

__all__ = ['StreamView', 'DistributionCanvas']
