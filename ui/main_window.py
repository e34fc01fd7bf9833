"""
Main window for the path car simulator.
"""
import logging

import numpy as np
from PyQt5 import QtWidgets, QtCore
from PyQt5.QtWidgets import (
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QGroupBox,
)

from simulation.config import SimulationConfig
from simulation.controller import SimulationController
from simulation.geometry import path_length
from simulation.metrics import format_elapsed
from ui.canvases import SceneCanvas, SpeedTimeCanvas
from ui.styles import BUTTON_COLORS, DARK_STYLESHEET, SPEED_READOUT_STYLE

logger = logging.getLogger(__name__)

METRIC_ROWS = [
    "Elapsed Time",
    "Distance Traveled",
    "Current Speed",
    "Max Speed",
    "Average Speed",
    "Path Length",
]


class MainWindow(QMainWindow):
    """
    Simulator window.

    Displays:
    - Drawing surface with the recorded path and the car
    - Start / Reset / Clear / Accelerate / Brake controls
    - Current speed readout
    - Speed-time chart and run metrics (extended variant only)
    """

    def __init__(self, config: SimulationConfig = None, controller: SimulationController = None):
        super().__init__()

        self.config = config or SimulationConfig()
        self.controller = controller or SimulationController(self.config, parent=self)

        self.setWindowTitle("Physics Car Simulation")
        self.resize(1300 if self.config.track_metrics else 700, 720)

        central = QWidget()
        self.setCentralWidget(central)

        root_layout = QHBoxLayout()
        root_layout.setContentsMargins(8, 8, 8, 8)
        root_layout.setSpacing(10)
        central.setLayout(root_layout)

        root_layout.addLayout(self._build_left_column(), 1)

        self.speed_chart = None
        self.metrics_table = None
        if self.config.track_metrics:
            root_layout.addLayout(self._build_right_column(), 1)

        self.setStyleSheet(DARK_STYLESHEET)

        # Wire canvas input and engine updates
        self.scene_canvas.pointer_pressed.connect(self.controller.begin_path)
        self.scene_canvas.pointer_moved.connect(self.controller.extend_path)
        self.scene_canvas.pointer_released.connect(self.controller.end_path)
        self.controller.state_changed.connect(self.refresh)
        self.controller.status_update.connect(self._on_status)

        self.refresh()

    def _build_left_column(self):
        """Build left column: drawing surface, controls, speed readout."""
        left_col = QVBoxLayout()
        left_col.setSpacing(10)

        title_label = QLabel("Draw a path, start the car, and watch its speed over time.")
        title_label.setAlignment(QtCore.Qt.AlignCenter)
        left_col.addWidget(title_label)

        scene_group = QGroupBox("Track")
        scene_layout = QVBoxLayout()
        scene_group.setLayout(scene_layout)
        self.scene_canvas = SceneCanvas(
            self,
            width_px=self.config.canvas_width,
            height_px=self.config.canvas_height,
            grid_px=self.config.grid_px,
        )
        self.scene_canvas.setFixedSize(self.config.canvas_width, self.config.canvas_height)
        scene_layout.addWidget(self.scene_canvas, alignment=QtCore.Qt.AlignCenter)
        left_col.addWidget(scene_group)

        # Control buttons
        button_row = QHBoxLayout()
        self.buttons = {}
        handlers = {
            "Start": self.controller.start,
            "Reset": self.controller.reset,
            "Clear": self.controller.clear,
            "Accelerate": self.controller.accelerate,
            "Brake": self.controller.brake,
        }
        for name, handler in handlers.items():
            button = QPushButton(name)
            button.setStyleSheet(f"QPushButton:enabled {{ background-color: {BUTTON_COLORS[name]}; }}")
            button.clicked.connect(handler)
            button_row.addWidget(button)
            self.buttons[name] = button
        left_col.addLayout(button_row)

        # Current speed
        speed_group = QGroupBox("Current Speed")
        speed_layout = QVBoxLayout()
        speed_group.setLayout(speed_layout)
        self.speed_label = QLabel("0.0")
        self.speed_label.setAlignment(QtCore.Qt.AlignCenter)
        self.speed_label.setStyleSheet(SPEED_READOUT_STYLE)
        speed_unit = QLabel(f"pixels/frame (max {self.config.speed_max})")
        speed_unit.setAlignment(QtCore.Qt.AlignCenter)
        self.status_label = QLabel("Status: IDLE")
        self.status_label.setAlignment(QtCore.Qt.AlignCenter)
        speed_layout.addWidget(self.speed_label)
        speed_layout.addWidget(speed_unit)
        speed_layout.addWidget(self.status_label)
        left_col.addWidget(speed_group)

        left_col.addStretch()
        return left_col

    def _build_right_column(self):
        """Build right column: speed-time chart + metrics table."""
        right_col = QVBoxLayout()
        right_col.setSpacing(10)

        chart_group = QGroupBox("Speed-Time Graph")
        chart_layout = QVBoxLayout()
        chart_group.setLayout(chart_layout)
        self.speed_chart = SpeedTimeCanvas(self, width=6, height=3, dpi=100)
        chart_layout.addWidget(self.speed_chart)

        metrics_group = QGroupBox("Metrics")
        metrics_layout = QVBoxLayout()
        metrics_group.setLayout(metrics_layout)

        self.metrics_table = QTableWidget(len(METRIC_ROWS), 1)
        self.metrics_table.setHorizontalHeaderLabels(["Value"])
        self.metrics_table.setVerticalHeaderLabels(METRIC_ROWS)
        self.metrics_table.horizontalHeader().setStretchLastSection(True)
        self.metrics_table.setEditTriggers(QtWidgets.QAbstractItemView.NoEditTriggers)
        self.metrics_table.setSelectionMode(QtWidgets.QAbstractItemView.NoSelection)
        for row in range(len(METRIC_ROWS)):
            self.metrics_table.setItem(row, 0, QTableWidgetItem("--"))
        metrics_layout.addWidget(self.metrics_table)

        right_col.addWidget(chart_group, 3)
        right_col.addWidget(metrics_group, 2)
        return right_col

    # ==========================================================================
    # Data Update Methods
    # ==========================================================================

    def refresh(self):
        """Redraw everything from the current simulation state."""
        state = self.controller.state
        try:
            self.scene_canvas.render(state)
            if self.speed_chart is not None:
                self._update_chart(state.metrics)
            if self.metrics_table is not None:
                self._update_metrics(state)
        except Exception as e:
            logger.error(f"Error in visualization update: {e}", exc_info=True)

        self.speed_label.setText(f"{state.car.speed:.1f}")
        self._update_controls()

    def _update_chart(self, metrics):
        samples = metrics.speed_samples
        if not samples:
            self.speed_chart.clear_data()
            return
        times = np.array([s.time for s in samples], dtype=float)
        speeds = np.array([s.speed for s in samples], dtype=float)
        self.speed_chart.update_data(times, speeds, metrics.elapsed_seconds, metrics.max_speed)

    def _update_metrics(self, state):
        metrics = state.metrics
        values = [
            f"{metrics.elapsed_seconds:.2f} s ({format_elapsed(metrics.elapsed_seconds)})",
            f"{metrics.distance_traveled:.2f} px",
            f"{state.car.speed:.2f} px/frame",
            f"{metrics.max_speed:.2f} px/frame",
            f"{metrics.average_speed:.2f} px/s",
            f"{path_length(state.path):.2f} px",
        ]
        for row, value in enumerate(values):
            self.metrics_table.setItem(row, 0, QTableWidgetItem(value))

    def _update_controls(self):
        """Enable exactly the commands whose preconditions hold."""
        engine = self.controller.engine
        self.buttons["Start"].setEnabled(engine.can_start)
        self.buttons["Clear"].setEnabled(engine.can_clear)
        self.buttons["Accelerate"].setEnabled(engine.can_accelerate)
        self.buttons["Brake"].setEnabled(engine.can_brake)
        self.status_label.setText(f"Status: {engine.status.name}")

    def _on_status(self, message: str):
        logger.info(f"[Status] {message}")

    def closeEvent(self, event):
        """Stop timers and detach canvases before the window goes away."""
        self.controller.shutdown()
        self.scene_canvas.release()
        if self.speed_chart is not None:
            self.speed_chart.release()
        super().closeEvent(event)
