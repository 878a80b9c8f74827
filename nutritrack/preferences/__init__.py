# -*- coding: utf-8 -*-
"""Per-user preference store (selected categories, persona, timings, score history)."""

from .storage import PreferenceStore

__all__ = [
    "PreferenceStore",
]
