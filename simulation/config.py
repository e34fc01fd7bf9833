"""
Runtime configuration for the simulator.

Values come from PATHSIM_* environment variables; main.py loads a .env file
with python-dotenv before calling SimulationConfig.from_env().
"""
import os
from dataclasses import dataclass
from typing import Mapping, Optional

VARIANTS = ("extended", "basic")

# Top speed per variant (pixels per tick)
SPEED_MAX_BY_VARIANT = {
    "extended": 20,
    "basic": 10,
}


@dataclass(frozen=True)
class SimulationConfig:
    variant: str = "extended"
    speed_max: int = 20
    tick_ms: int = 50               # motion tick period
    clock_ms: int = 100             # elapsed-time display period
    canvas_width: int = 600
    canvas_height: int = 400
    grid_px: int = 50
    log_level: str = "INFO"

    @property
    def track_metrics(self) -> bool:
        """Only the extended variant collects run statistics and draws the chart."""
        return self.variant == "extended"

    @classmethod
    def for_variant(cls, variant: str, **overrides) -> "SimulationConfig":
        if variant not in VARIANTS:
            raise ValueError(f"Unknown variant '{variant}'. Use 'extended' or 'basic'.")
        overrides.setdefault("speed_max", SPEED_MAX_BY_VARIANT[variant])
        return cls(variant=variant, **overrides)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None,
                 variant: Optional[str] = None) -> "SimulationConfig":
        """
        Build a config from environment variables.

        Args:
            env: Mapping to read from (defaults to os.environ)
            variant: Overrides PATHSIM_VARIANT when given (command line flag)
        """
        if env is None:
            env = os.environ

        variant = variant or env.get("PATHSIM_VARIANT", "extended").strip().lower()

        overrides = {}
        int_keys = {
            "speed_max": "PATHSIM_SPEED_MAX",
            "tick_ms": "PATHSIM_TICK_MS",
            "clock_ms": "PATHSIM_CLOCK_MS",
            "canvas_width": "PATHSIM_CANVAS_WIDTH",
            "canvas_height": "PATHSIM_CANVAS_HEIGHT",
            "grid_px": "PATHSIM_GRID_PX",
        }
        for field_name, key in int_keys.items():
            raw = env.get(key)
            if raw is None or raw.strip() == "":
                continue
            overrides[field_name] = _positive_int(key, raw)

        log_level = env.get("PATHSIM_LOG_LEVEL")
        if log_level:
            overrides["log_level"] = log_level.strip().upper()

        return cls.for_variant(variant, **overrides)


def _positive_int(key: str, raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got '{raw}'") from None
    if value <= 0:
        raise ValueError(f"{key} must be positive, got {value}")
    return value
