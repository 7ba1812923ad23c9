"""
Main window for the trajectory playback viewer.
"""
import logging
from typing import List

from PyQt5 import QtCore, QtGui
from PyQt5.QtWidgets import (
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QShortcut,
    QVBoxLayout,
    QWidget,
)

from playback.clock import ClockDriver, PlaybackClock
from playback.config import PlaybackConfig, StreamConfig
from playback.frame_cache import FrameCache, PrecomputeTask
from playback.renderer import FrameRenderer, load_sprite
from playback.session import PlaybackSession, PlaybackState
from playback.stream import Stream
from playback.transport import TransportController
from trajectory.distribution import DensitySampler
from trajectory.loader import LoadError, load_samples
from ui.canvases import DistributionCanvas, StreamView
from ui.styles import DARK_STYLESHEET

logger = logging.getLogger(__name__)

STATUS_TEXT = {
    PlaybackState.WAITING: "⏳ Precomputing frames...",
    PlaybackState.READY_PAUSED: "⏸️ Paused",
    PlaybackState.READY_PLAYING: "▶️ Playing",
}


class MainWindow(QMainWindow):
    """
    Side-by-side playback of one or more trajectory conditions.

    Displays:
    - One view per stream (condition), all advancing in lockstep
    - Optional position-distribution view for the first stream
    - Play/Pause and Reset transport buttons

    The window is also the display the playback engine draws through
    (show_frame / show_progress / show_error).
    """

    def __init__(self, config: PlaybackConfig, stream_configs: List[StreamConfig], density: bool = False):
        super().__init__()

        self.config = config
        self.setWindowTitle("Insect Trajectory Playback")

        self.streams = [Stream(cfg) for cfg in stream_configs]
        self.renderer = FrameRenderer(config, load_sprite(config.sprite_path))
        self.cache = FrameCache(self.renderer, chunk_size=config.chunk_size)
        self.session = PlaybackSession(self.streams, display=self)
        self.clock = PlaybackClock(self.session, frame_interval_ms=config.frame_interval_ms)
        self.transport = TransportController(self.session)
        self.driver = ClockDriver(self.clock, parent=self)
        self.tasks = {}

        self.views = {}
        self.distribution_canvas = None
        self.density_sampler = None

        central = QWidget()
        self.setCentralWidget(central)
        root_layout = QVBoxLayout()
        root_layout.setContentsMargins(8, 8, 8, 8)
        root_layout.setSpacing(10)
        central.setLayout(root_layout)

        root_layout.addLayout(self._build_views(density), 1)
        root_layout.addLayout(self._build_controls())

        if density and self.streams:
            self.density_sampler = DensitySampler(
                self.streams[0],
                sample_window=config.distribution_window,
                update_interval=config.distribution_interval,
            )
            self.clock.add_advance_listener(self._update_distribution)
            self.transport.add_reset_listener(self._on_reset_distribution)

        self.status_timer = QtCore.QTimer(self)
        self.status_timer.setInterval(250)
        self.status_timer.timeout.connect(self._refresh_status)

        self.setStyleSheet(DARK_STYLESHEET)

    def _build_views(self, density: bool):
        """Build the stream view grid (two columns)."""
        grid = QGridLayout()
        grid.setSpacing(10)

        panels = []
        for stream in self.streams:
            group = QGroupBox(stream.title)
            layout = QVBoxLayout()
            group.setLayout(layout)
            view = StreamView(stream.config.width, stream.config.height, self)
            layout.addWidget(view)
            self.views[stream.stream_id] = view
            panels.append(group)

        if density:
            group = QGroupBox("Position Distribution")
            layout = QVBoxLayout()
            group.setLayout(layout)
            self.distribution_canvas = DistributionCanvas(self)
            layout.addWidget(self.distribution_canvas)
            panels.append(group)

        columns = 2 if len(panels) > 1 else 1
        for i, panel in enumerate(panels):
            grid.addWidget(panel, i // columns, i % columns)
        return grid

    def _build_controls(self):
        """Build transport buttons and status label."""
        controls = QHBoxLayout()

        self.play_pause_btn = QPushButton("Play")
        self.play_pause_btn.clicked.connect(self.on_play_pause)
        self.reset_btn = QPushButton("Reset")
        self.reset_btn.clicked.connect(self.on_reset)
        self.status_label = QLabel(STATUS_TEXT[PlaybackState.WAITING])

        QShortcut(QtGui.QKeySequence(QtCore.Qt.Key_Space), self, activated=self.on_play_pause)
        QShortcut(QtGui.QKeySequence(QtCore.Qt.Key_R), self, activated=self.on_reset)

        controls.addWidget(self.play_pause_btn)
        controls.addWidget(self.reset_btn)
        controls.addSpacing(20)
        controls.addWidget(self.status_label)
        controls.addStretch()
        return controls

    # ==========================================================================
    # Start-up
    # ==========================================================================

    def start(self):
        """Load every stream, start precomputation and the playback clock."""
        for stream in self.streams:
            try:
                samples = load_samples(stream.config.data_path, time_step=self.config.time_step)
            except LoadError as e:
                stream.fail(str(e))
                self.session.stream_failed(stream)
                continue

            stream.load(samples)
            task = PrecomputeTask(self.cache, stream, parent=self)
            task.finished.connect(self._on_precompute_finished)
            self.tasks[stream.stream_id] = task
            task.start()

        self.driver.start()
        self.status_timer.start()

    def _on_precompute_finished(self, stream_id: str):
        stream = self.session.stream(stream_id)
        self.session.stream_finished(stream)
        self.tasks.pop(stream_id, None)
        if stream.is_ready and stream is self.streams[0] and self.density_sampler is not None:
            self._update_distribution()
        self._refresh_status()

    # ==========================================================================
    # Display
    # ==========================================================================

    def show_frame(self, stream, frame):
        self.views[stream.stream_id].show_frame(frame)

    def show_progress(self, stream, percent):
        self.views[stream.stream_id].show_progress(percent)

    def show_error(self, stream, message):
        self.views[stream.stream_id].show_frame(self.renderer.render_error(stream, message))

    def _update_distribution(self):
        stream = self.density_sampler.stream
        if not stream.is_ready:
            return
        result = self.density_sampler.update(stream.tick_index)
        if result is not None:
            xs, ys, t = result
            self.distribution_canvas.update_distribution(xs, ys, t)

    def _on_reset_distribution(self):
        self.density_sampler.reset()
        self._update_distribution()

    def _refresh_status(self):
        self.status_label.setText(STATUS_TEXT[self.session.state])
        self.play_pause_btn.setText("Pause" if self.session.is_playing else "Play")

    # ==========================================================================
    # Transport
    # ==========================================================================

    def on_play_pause(self):
        self.transport.toggle_play_pause()
        self._refresh_status()

    def on_reset(self):
        self.transport.reset()

    def closeEvent(self, event):
        self.driver.stop()
        self.status_timer.stop()
        super().closeEvent(event)
