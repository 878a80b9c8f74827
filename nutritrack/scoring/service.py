# -*- coding: utf-8 -*-
"""Dashboard flow: read inputs from the preference store, compute, hand back for persistence."""

from __future__ import annotations

from typing import Optional

from ..preferences import PreferenceStore
from .calculator import ScoreCalculator, max_score_for
from .models import CategoryScore, DashboardScore, InsightsResponse, ScoreHistoryEntry, ScoreHistoryResponse
from .report import build_report

HOME_PASS_THRESHOLD = 40.0
INSIGHTS_PASS_THRESHOLD = 50.0


def refresh_dashboard(store: PreferenceStore, calculator: Optional[ScoreCalculator] = None) -> DashboardScore:
    """Recompute the total score, store it and append it to the history log."""
    calculator = calculator or ScoreCalculator()
    score = calculator.total_score(store.user_id, store.sex, store.selected_categories)
    store.total_score = score
    store.append_score(score)
    return DashboardScore(user_id=store.user_id, score=score, passing=score >= HOME_PASS_THRESHOLD)


def get_insights(store: PreferenceStore, calculator: Optional[ScoreCalculator] = None) -> InsightsResponse:
    calculator = calculator or ScoreCalculator()
    breakdown = calculator.category_breakdown(store.user_id)
    total = store.total_score
    return InsightsResponse(
        user_id=store.user_id,
        categories=[
            CategoryScore(category=name, score=value, max_score=max_score_for(name))
            for name, value in breakdown.items()
        ],
        total_score=total,
        passing=total >= INSIGHTS_PASS_THRESHOLD,
    )


def get_history(store: PreferenceStore) -> ScoreHistoryResponse:
    return ScoreHistoryResponse(
        user_id=store.user_id,
        scores=[ScoreHistoryEntry(index=i, score=s) for i, s in enumerate(store.score_history, start=1)],
    )


def share_report(store: PreferenceStore, calculator: Optional[ScoreCalculator] = None) -> str:
    calculator = calculator or ScoreCalculator()
    return build_report(calculator.category_breakdown(store.user_id), store.total_score)
