# -*- coding: utf-8 -*-
"""Scoring — API endpoints (dashboard, insights, history, share report)."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from ..auth.security import current_user
from ..preferences import PreferenceStore
from .models import DashboardScore, InsightsResponse, ScoreHistoryResponse
from .service import get_history, get_insights, refresh_dashboard, share_report

router = APIRouter(prefix="/api/scores", tags=["Scores"])


@router.post("/dashboard", response_model=DashboardScore, summary="Compute, store and log the food quality score")
def dashboard(user: dict = Depends(current_user)):
    return refresh_dashboard(PreferenceStore(user["id"]))


@router.get("/insights", response_model=InsightsResponse, summary="Per-category score breakdown")
def insights(user: dict = Depends(current_user)):
    return get_insights(PreferenceStore(user["id"]))


@router.get("/history", response_model=ScoreHistoryResponse, summary="Previously computed scores")
def history(user: dict = Depends(current_user)):
    return get_history(PreferenceStore(user["id"]))


@router.get("/report", response_class=PlainTextResponse, summary="Shareable text report")
def report(user: dict = Depends(current_user)):
    return share_report(PreferenceStore(user["id"]))
