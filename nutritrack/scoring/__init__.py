# -*- coding: utf-8 -*-
"""
Food quality scoring
"""

from .calculator import ScoreCalculator, CATEGORY_MAX_SCORES, QUESTIONNAIRE_COLUMNS
from .report import build_report

__all__ = [
    'ScoreCalculator',
    'CATEGORY_MAX_SCORES',
    'QUESTIONNAIRE_COLUMNS',
    'build_report',
]
