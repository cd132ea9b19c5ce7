"""Signal-shaping helpers: mapping, wrapping, fast trigonometry, easing, wave shapes, random numbers and list containers."""

__version__ = "0.1.0"