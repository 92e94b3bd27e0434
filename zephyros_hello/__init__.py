"""ZephyrOS Hello: welcome/settings window for the ZephyrOS desktop."""

__version__ = "0.1.0"
