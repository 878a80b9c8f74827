# -*- coding: utf-8 -*-
"""Questionnaire — API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ..auth.security import current_user
from ..preferences import PreferenceStore
from .models import FOOD_CATEGORIES, PERSONAS, QuestionnaireAnswers, QuestionnaireOptions
from .storage import load_answers, save_answers

router = APIRouter(prefix="/api/questionnaire", tags=["Questionnaire"])


@router.get("/options", response_model=QuestionnaireOptions, summary="Food categories and personas")
def questionnaire_options():
    return QuestionnaireOptions(categories=list(FOOD_CATEGORIES), personas=list(PERSONAS))


@router.get("", response_model=QuestionnaireAnswers, summary="Stored questionnaire answers")
def get_questionnaire(user: dict = Depends(current_user)):
    return load_answers(PreferenceStore(user["id"]))


@router.put("", response_model=QuestionnaireAnswers, summary="Save questionnaire answers")
def put_questionnaire(answers: QuestionnaireAnswers, user: dict = Depends(current_user)):
    return save_answers(PreferenceStore(user["id"]), answers)
