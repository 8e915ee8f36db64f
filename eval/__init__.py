# -*- coding: utf-8 -*-
"""
Evaluation utilities: path validation, label layer statistics and an
independent distance oracle (SciPy csgraph) for cross-checking labels.
"""

from __future__ import annotations

from .metrics import (
    manhattan,
    validate_path,
    label_layers,
    oracle_distances,
)

__all__ = [
    "manhattan",
    "validate_path",
    "label_layers",
    "oracle_distances",
]
