"""
Speed-vs-time chart for the current run.
"""
import math

import numpy as np
from matplotlib.backends.backend_qt5agg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure

from ui.styles import ACCENT_RED, BG_COLOR, BG_COLOR_LIGHT, GRID_COLOR, TEXT_COLOR_DIM

MIN_TIME_SPAN = 10.0    # seconds
MIN_SPEED_SPAN = 20.0   # pixels per tick
TICK_INTERVALS = 5


def chart_axes(elapsed: float, max_speed: float):
    """
    Axis extents and tick positions for the speed chart.

    The time axis spans max(10, elapsed) seconds with a whole-second step of
    ceil(span / 5); the speed axis spans max(20, max_speed) in five equal steps.

    Returns:
        (time_span, time_ticks, speed_span, speed_ticks)
    """
    time_span = max(MIN_TIME_SPAN, elapsed)
    time_step = math.ceil(time_span / TICK_INTERVALS)
    time_ticks = np.arange(0, time_span + 1e-9, time_step, dtype=float)

    speed_span = max(MIN_SPEED_SPAN, max_speed)
    speed_ticks = np.linspace(0, speed_span, TICK_INTERVALS + 1)

    return time_span, time_ticks, speed_span, speed_ticks


class SpeedTimeCanvas(FigureCanvas):
    """
    Matplotlib canvas plotting speed samples against run time.

    Unlike an autoscaled time series, the axes grow only when the run
    outgrows the 10 s / 20 px-per-tick minimum window.
    """

    def __init__(self, parent=None, width=6, height=3, dpi=100):
        self.fig = Figure(figsize=(width, height), dpi=dpi)
        self.ax = self.fig.add_subplot(111)
        super().__init__(self.fig)
        self.setParent(parent)
        self._released = False

        self.fig.patch.set_facecolor(BG_COLOR)
        self.ax.set_facecolor(BG_COLOR_LIGHT)

        for spine in self.ax.spines.values():
            spine.set_color(TEXT_COLOR_DIM)
        self.ax.tick_params(colors=TEXT_COLOR_DIM, labelsize=7)
        self.ax.xaxis.label.set_color(TEXT_COLOR_DIM)
        self.ax.yaxis.label.set_color(TEXT_COLOR_DIM)
        self.ax.title.set_color("#FFFFFF")

        self.ax.set_title("Speed-Time Graph", fontsize=9)
        self.ax.set_xlabel("Time [s]", fontsize=8)
        self.ax.set_ylabel("Speed [px/tick]", fontsize=8)
        self.ax.grid(True, color=GRID_COLOR, alpha=0.6)

        self.line, = self.ax.plot([], [], linewidth=1.5, color=ACCENT_RED)
        self._apply_axes(0.0, 0.0)

        self.fig.tight_layout(pad=0.8)

    def _apply_axes(self, elapsed: float, max_speed: float):
        time_span, time_ticks, speed_span, speed_ticks = chart_axes(elapsed, max_speed)
        self.ax.set_xlim(0, time_span)
        self.ax.set_ylim(0, speed_span)
        self.ax.set_xticks(time_ticks)
        self.ax.set_yticks(speed_ticks)
        self.ax.set_xticklabels([f"{t:g}" for t in time_ticks])
        self.ax.set_yticklabels([f"{s:.1f}" for s in speed_ticks])

    def update_data(self, t: np.ndarray, y: np.ndarray, elapsed: float, max_speed: float):
        """
        Replace the plotted samples and rescale the axes.

        Args:
            t: Sample times in seconds (X-axis)
            y: Sample speeds (Y-axis)
            elapsed: Run time so far, sets the time axis span
            max_speed: Highest speed so far, sets the speed axis span
        """
        if self._released:
            return
        if t.size:
            # The clock tick lags the motion tick; keep the newest sample in view
            elapsed = max(elapsed, float(t[-1]))
        self._apply_axes(elapsed, max_speed)
        self.line.set_data(t, y)
        self.draw_idle()

    def clear_data(self):
        """Blank the chart back to its empty default window."""
        self.update_data(np.array([]), np.array([]), 0.0, 0.0)

    def release(self):
        self._released = True
