"""
Drawing surface: background grid, recorded path and the car sprite.
"""
import numpy as np
from PyQt5 import QtCore
from matplotlib.backends.backend_qt5agg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.collections import LineCollection
from matplotlib.figure import Figure
from matplotlib.patches import Polygon

from simulation.geometry import car_outline, path_arrays
from ui.styles import (
    BG_COLOR_LIGHT,
    CAR_BODY_COLOR,
    CAR_WHEEL_COLOR,
    PATH_COLOR,
    SCENE_GRID_COLOR,
)


def grid_segments(width: int, height: int, pitch: int) -> np.ndarray:
    """Line segments for a fixed-pitch grid covering a width x height surface."""
    segments = []
    for x in range(0, width + 1, pitch):
        segments.append([(x, 0), (x, height)])
    for y in range(0, height + 1, pitch):
        segments.append([(0, y), (width, y)])
    return np.array(segments, dtype=float)


class SceneCanvas(FigureCanvas):
    """
    Matplotlib canvas the user draws on and the car drives over.

    Data coordinates are canvas pixels with the origin in the top left corner,
    so path points map 1:1 onto the axes.

    Signals:
        pointer_pressed(float x, float y)
        pointer_moved(float x, float y)
        pointer_released()
    """
    pointer_pressed = QtCore.pyqtSignal(float, float)
    pointer_moved = QtCore.pyqtSignal(float, float)
    pointer_released = QtCore.pyqtSignal()

    def __init__(self, parent=None, width_px=600, height_px=400, grid_px=50, dpi=100):
        """
        Initialize scene canvas.

        Args:
            parent: Parent QWidget
            width_px: Drawing surface width in pixels
            height_px: Drawing surface height in pixels
            grid_px: Background grid pitch in pixels
            dpi: Dots per inch resolution
        """
        self.fig = Figure(figsize=(width_px / dpi, height_px / dpi), dpi=dpi)
        self.ax = self.fig.add_axes([0, 0, 1, 1])
        super().__init__(self.fig)
        self.setParent(parent)

        self.width_px = width_px
        self.height_px = height_px
        self._released = False

        self.fig.patch.set_facecolor(BG_COLOR_LIGHT)
        self.ax.set_facecolor(BG_COLOR_LIGHT)

        # Pixel space, y grows downward
        self.ax.set_xlim(0, width_px)
        self.ax.set_ylim(height_px, 0)
        self.ax.set_xticks([])
        self.ax.set_yticks([])
        for spine in self.ax.spines.values():
            spine.set_visible(False)

        self.grid = LineCollection(
            grid_segments(width_px, height_px, grid_px),
            colors=SCENE_GRID_COLOR,
            linewidths=1,
        )
        self.ax.add_collection(self.grid)

        self.path_line, = self.ax.plot(
            [], [], color=PATH_COLOR, linewidth=3,
            solid_joinstyle="round", solid_capstyle="round",
        )

        # Body first, then the four wheels (same order as car_outline)
        self.car_patches = []
        colors = [CAR_BODY_COLOR] + [CAR_WHEEL_COLOR] * 4
        for color in colors:
            patch = Polygon(np.zeros((4, 2)), closed=True, facecolor=color, edgecolor="none")
            self.ax.add_patch(patch)
            self.car_patches.append(patch)

        self.mpl_connect("button_press_event", self._on_press)
        self.mpl_connect("motion_notify_event", self._on_motion)
        self.mpl_connect("button_release_event", self._on_release)

    def render(self, state):
        """
        Redraw the path and the car from the simulation state.

        Args:
            state: SimulationState to draw
        """
        if self._released:
            return

        if state.path:
            xs, ys = path_arrays(state.path)
            self.path_line.set_data(xs, ys)
        else:
            self.path_line.set_data([], [])

        car = state.car
        for patch, corners in zip(self.car_patches, car_outline(car.position, car.heading)):
            patch.set_xy(corners)

        self.draw_idle()

    def release(self):
        """Detach from the window; later render calls do nothing."""
        self._released = True

    # ==========================================================================
    # Mouse handling
    # ==========================================================================

    def _on_press(self, event):
        if event.button != 1 or event.inaxes is not self.ax:
            return
        self.pointer_pressed.emit(float(event.xdata), float(event.ydata))

    def _on_motion(self, event):
        if event.inaxes is not self.ax or event.xdata is None:
            return
        self.pointer_moved.emit(float(event.xdata), float(event.ydata))

    def _on_release(self, event):
        if event.button != 1:
            return
        self.pointer_released.emit()
