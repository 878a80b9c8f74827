# -*- coding: utf-8 -*-
"""Plain-text share report for the insights screen."""

from __future__ import annotations

from typing import Dict, List

from .calculator import TOTAL_MAX_SCORE, max_score_for

REPORT_TITLE = "\U0001F37D️ NutriTrack Food Quality Report"


def format_score(value: float) -> str:
    """Whole numbers print bare; anything else uses the shortest exact repr."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def build_report(scores: Dict[str, float], total_score: float) -> str:
    lines: List[str] = [REPORT_TITLE, "=" * 31, ""]
    for category, score in scores.items():
        lines.append(f"{category}: {format_score(score)} / {max_score_for(category)}")
    lines.append("")
    lines.append(f"\U0001F31F Total Food Quality Score: {format_score(total_score)} / {TOTAL_MAX_SCORE}")
    lines.append("")
    lines.append("\U0001F4D8 This report reflects your food intake breakdown based on your preferences.")
    lines.append("Keep striving for balanced nutrition! \U0001F4AA")
    return "\n".join(lines)
