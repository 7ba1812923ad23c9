"""
Position distribution canvas for the density companion view.
"""
import numpy as np
from matplotlib.backends.backend_qt5agg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure

from ui.styles import BG_COLOR, BG_COLOR_LIGHT, DENSITY_COLOR, GRID_COLOR, TEXT_COLOR_DIM


class DistributionCanvas(FigureCanvas):
    """
    Matplotlib canvas showing where insects were during a short time window.

    Each recent position is one translucent dot, so dense regions read as
    darker red.
    """

    def __init__(self, parent=None, width=5, height=5, dpi=100):
        """
        Initialize distribution canvas.

        Args:
            parent: Parent QWidget
            width: Figure width in inches
            height: Figure height in inches
            dpi: Dots per inch resolution
        """
        self.fig = Figure(figsize=(width, height), dpi=dpi)
        self.ax = self.fig.add_subplot(111)
        super().__init__(self.fig)
        self.setParent(parent)

        self.fig.patch.set_facecolor(BG_COLOR)
        self.ax.set_facecolor(BG_COLOR_LIGHT)

        for spine in self.ax.spines.values():
            spine.set_color(TEXT_COLOR_DIM)
        self.ax.tick_params(colors=TEXT_COLOR_DIM, labelsize=7)
        self.ax.title.set_color("#FFFFFF")

        self.ax.set_xlim(-1, 1)
        self.ax.set_ylim(-1, 1)
        self.ax.set_aspect("equal")
        self.ax.grid(True, color=GRID_COLOR, alpha=0.6)
        self.ax.axhline(0, color=TEXT_COLOR_DIM, linewidth=1)
        self.ax.axvline(0, color=TEXT_COLOR_DIM, linewidth=1)
        self.ax.set_title("Position Distribution", fontsize=10)

        self.scatter = self.ax.scatter([], [], s=9, color=DENSITY_COLOR, edgecolors="none")

        self.fig.tight_layout(pad=1.0)

    def update_distribution(self, xs: np.ndarray, ys: np.ndarray, t: float):
        """
        Replace the scatter with a new set of positions.

        Args:
            xs: X positions (data space)
            ys: Y positions (data space)
            t: Data time the window ends at
        """
        if xs.size:
            self.scatter.set_offsets(np.column_stack([xs, ys]))
        else:
            self.scatter.set_offsets(np.empty((0, 2)))
        self.ax.set_title(f"Position Distribution (t = {t:.2f}s)", fontsize=10)
        self.draw_idle()
