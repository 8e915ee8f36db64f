# -*- coding: utf-8 -*-
"""
Rendering helpers:
- format_grid / on_path : plain text (console)
- render_grid / save_grid_figure : matplotlib (import viz.figures directly; it pulls in pyplot)
"""

from .text import format_grid, on_path

__all__ = ["format_grid", "on_path"]
