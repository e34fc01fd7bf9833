"""
Matplotlib canvas widgets for the path simulator.
"""
from ui.canvases.scene import SceneCanvas
from ui.canvases.speed_chart import SpeedTimeCanvas

__all__ = ['SceneCanvas', 'SpeedTimeCanvas']
