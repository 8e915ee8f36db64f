# -*- coding: utf-8 -*-
"""
Command-line entry points (run with `python -m cli.<name>`):

- run_demo   : console walkthrough (budgeted waves, reset, full wave, backtrace)
- run_batch  : random-grid batch check against the SciPy distance oracle, CSV out
"""
__all__ = [
    "run_demo",
    "run_batch",
]
