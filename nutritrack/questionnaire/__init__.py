# -*- coding: utf-8 -*-
"""Food-intake questionnaire (categories, persona, daily timings)."""
