# -*- coding: utf-8 -*-
"""Questionnaire answers persisted through the preference store."""

from __future__ import annotations

import logging

from ..preferences import PreferenceStore
from .models import FOOD_CATEGORIES, PERSONA_NAMES, QuestionnaireAnswers

logger = logging.getLogger(__name__)


def load_answers(store: PreferenceStore) -> QuestionnaireAnswers:
    persona = store.persona
    return QuestionnaireAnswers(
        categories=[c for c in store.selected_categories if c in FOOD_CATEGORIES],
        persona=persona if persona in PERSONA_NAMES else "",
        meal_time=store.meal_time,
        sleep_time=store.sleep_time,
        wake_up_time=store.wake_up_time,
    )


def save_answers(store: PreferenceStore, answers: QuestionnaireAnswers) -> QuestionnaireAnswers:
    store.selected_categories = answers.categories
    store.persona = answers.persona
    store.meal_time = answers.meal_time
    store.sleep_time = answers.sleep_time
    store.wake_up_time = answers.wake_up_time

    logger.debug("Saved selected categories for %s: %s", store.user_id, ",".join(answers.categories))
    logger.debug("Saved persona for %s: %s", store.user_id, answers.persona)
    logger.debug(
        "Saved timings for %s: meal=%s sleep=%s wake=%s",
        store.user_id,
        answers.meal_time,
        answers.sleep_time,
        answers.wake_up_time,
    )
    return load_answers(store)
