#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: munsellab/shared/clamping.py


def _clamp(v: float, lo: float, hi: float) -> float:
    """Clamp v into [lo, hi]; NaN collapses to lo."""
    if v != v:
        return lo
    return max(lo, min(hi, v))
