# -*- coding: utf-8 -*-
"""Questionnaire — Pydantic models and fixed option lists."""

from __future__ import annotations

import re
from typing import List

from pydantic import BaseModel, Field, field_validator

FOOD_CATEGORIES: List[str] = [
    "Fruits",
    "Vegetables",
    "Grains",
    "Wholegrain",
    "Meat",
    "Dairy",
    "Alcoholic beverages",
    "Sweets",
]

_TIME_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class Persona(BaseModel):
    name: str
    description: str


PERSONAS: List[Persona] = [
    Persona(
        name="Health Devotee",
        description=(
            "I'm passionate about healthy eating & health plays a big part in my life. I use social media to "
            "follow active lifestyle personalities or get new recipes/exercise ideas. I may even buy superfoods "
            "or follow a particular type of diet. I like to think I am super healthy."
        ),
    ),
    Persona(
        name="Mindful Eater",
        description=(
            "I'm health-conscious and being healthy and eating healthy is important to me. Although health means "
            "different things to different people, I make conscious lifestyle decisions about eating based on "
            "what I believe healthy means. I look for new recipes and healthy eating information on social media."
        ),
    ),
    Persona(
        name="Wellness Striver",
        description=(
            "I aspire to be healthy (but struggle sometimes). Healthy eating is hard work! I've tried to improve "
            "my diet, but always find things that make it difficult to stick with the changes. Sometimes I notice "
            "recipe ideas or healthy eating hacks, and if it seems easy enough, I'll give it a go."
        ),
    ),
    Persona(
        name="Balance Seeker",
        description=(
            "I try and live a balanced lifestyle, and I think that all foods are okay in moderation. I shouldn't "
            "have to feel guilty about eating a piece of cake now and again. I get all sorts of inspiration from "
            "social media like finding out about new restaurants, fun recipes and sometimes healthy eating tips."
        ),
    ),
    Persona(
        name="Health Procrastinator",
        description=(
            "I'm contemplating healthy eating but it's not a priority for me right now. I know the basics about "
            "what it means to be healthy, but it doesn't seem relevant to me right now. I have taken a few steps "
            "to be healthier but I am not motivated to make it a high priority because I have too many other "
            "things going on in my life."
        ),
    ),
    Persona(
        name="Food Carefree",
        description=(
            "I'm not bothered about healthy eating. I don't really see the point and I don't think about it. "
            "I don't really notice healthy eating tips or recipes and I don't care what I eat."
        ),
    ),
]

PERSONA_NAMES = {p.name for p in PERSONAS}


class QuestionnaireOptions(BaseModel):
    categories: List[str]
    personas: List[Persona]


class QuestionnaireAnswers(BaseModel):
    categories: List[str] = Field(default_factory=list)
    persona: str = ""
    meal_time: str = Field("", description="HH:MM (24h) or empty")
    sleep_time: str = Field("", description="HH:MM (24h) or empty")
    wake_up_time: str = Field("", description="HH:MM (24h) or empty")

    @field_validator("categories")
    @classmethod
    def _known_categories(cls, values: List[str]) -> List[str]:
        cleaned: List[str] = []
        for v in values:
            name = v.strip()
            if name not in FOOD_CATEGORIES:
                raise ValueError(f"unknown food category: {name!r}")
            if name not in cleaned:
                cleaned.append(name)
        return cleaned

    @field_validator("persona")
    @classmethod
    def _known_persona(cls, value: str) -> str:
        value = value.strip()
        if value and value not in PERSONA_NAMES:
            raise ValueError(f"unknown persona: {value!r}")
        return value

    @field_validator("meal_time", "sleep_time", "wake_up_time")
    @classmethod
    def _clock_time(cls, value: str) -> str:
        value = value.strip()
        if value and not _TIME_RE.match(value):
            raise ValueError("time must be HH:MM")
        return value
