#!/usr/bin/env python3
"""
Physics Car Simulation - Main Entry Point

Draw a path with the mouse, then drive a car along it with Accelerate/Brake
while a speed-time chart and run metrics update live.

Usage:
    python main.py              # Extended variant (metrics + chart, top speed 20)
    python main.py --basic      # Basic variant (top speed 10, no metrics)
"""
import sys
import logging
from PyQt5 import QtWidgets

# Configure logging FIRST - before any other imports
logging.basicConfig(
    level=logging.INFO,
    format='[%(levelname)s] %(name)s: %(message)s',
    stream=sys.stdout
)

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

from simulation.config import SimulationConfig
from ui.main_window import MainWindow

logger = logging.getLogger("main")


def main(variant: str = None):
    """
    Entry point for the simulator.

    Args:
        variant: "extended" or "basic"; None checks for --basic, then PATHSIM_VARIANT
    """
    if variant is None and "--basic" in sys.argv:
        variant = "basic"
    config = SimulationConfig.from_env(variant=variant)
    logging.getLogger().setLevel(config.log_level)

    logger.info(f"Starting simulator: variant={config.variant}, speed_max={config.speed_max}")
    app = QtWidgets.QApplication(sys.argv)

    window = MainWindow(config)
    window.show()

    # Run Qt event loop
    result = app.exec_()

    # Timers are released in closeEvent; this covers a loop exit without one
    window.controller.shutdown()
    logger.info("Goodbye!")
    sys.exit(result)


if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        print("\n" + "="*60)
        print("❌ FATAL ERROR:")
        print("="*60)
        print(f"Error type: {type(e).__name__}")
        print(f"Error message: {e}")
        import traceback
        print("\nFull traceback:")
        traceback.print_exc()
        print("="*60)
        sys.exit(1)
