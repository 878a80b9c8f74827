# -*- coding: utf-8 -*-
"""Scoring — Pydantic models."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class DashboardScore(BaseModel):
    user_id: str
    score: float = Field(..., description="Food quality score over the selected categories")
    max_score: int = 100
    passing: bool = Field(..., description="score >= 40 on the home screen")


class CategoryScore(BaseModel):
    category: str
    score: float
    max_score: int


class InsightsResponse(BaseModel):
    user_id: str
    categories: List[CategoryScore]
    total_score: float
    max_score: int = 100
    passing: bool = Field(..., description="total_score >= 50 on the insights screen")


class ScoreHistoryEntry(BaseModel):
    index: int = Field(..., ge=1)
    score: float


class ScoreHistoryResponse(BaseModel):
    user_id: str
    scores: List[ScoreHistoryEntry]
