"""Three-lane task board with drag reordering and timed card transitions."""

__version__ = "0.1.0"
