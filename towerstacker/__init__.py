"""A tower-stacking arcade game on a 64x32 pixel panel, with a terminal front end."""

__version__ = "0.1.0"
__all__ = ["screens", "storage", "tone", "led", "game", "cli"]