# -*- coding: utf-8 -*-
"""NutriTrack backend: roster login, food-intake questionnaire, food quality scoring."""

__version__ = "0.1.0"
