from .draw import base_layout, draw_spanning_trees

__all__ = [
    "base_layout",
    "draw_spanning_trees",
]
