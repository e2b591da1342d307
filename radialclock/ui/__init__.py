"""UI package."""

from .clock_widget import ClockWidget
from .radial_indicator import RadialIndicator
from .settings_dialog import SettingsDialog

__all__ = [
    "ClockWidget",
    "RadialIndicator",
    "SettingsDialog",
]
