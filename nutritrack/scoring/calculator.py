# -*- coding: utf-8 -*-
"""Food quality scoring over the HEIFA sub-score columns of the roster CSV."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from ..config import settings
from ..data_loader import UserTable, load_user_table, sum_score_cells

# Questionnaire vocabulary -> (male column, female column).
QUESTIONNAIRE_COLUMNS: Dict[str, Tuple[str, str]] = {
    "Vegetables": ("VegetablesHEIFAscoreMale", "VegetablesHEIFAscoreFemale"),
    "Fruits": ("FruitHEIFAscoreMale", "FruitHEIFAscoreFemale"),
    "Grains": ("GrainsandcerealsHEIFAscoreMale", "GrainsandcerealsHEIFAscoreFemale"),
    "Wholegrain": ("WholegrainsHEIFAscoreMale", "WholegrainsHEIFAscoreFemale"),
    "Meat": ("MeatandalternativesHEIFAscoreMale", "MeatandalternativesHEIFAscoreFemale"),
    "Dairy": ("DairyandalternativesHEIFAscoreMale", "DairyandalternativesHEIFAscoreFemale"),
    "Alcoholic beverages": ("AlcoholHEIFAscoreMale", "AlcoholHEIFAscoreFemale"),
    "Sweets": ("SugarHEIFAscoreMale", "SugarHEIFAscoreFemale"),
}

# Insights categories, matched against header names by substring. Order is display order.
CATEGORY_MAX_SCORES: Dict[str, int] = {
    "Discretionary": 10,
    "Meatandalternatives": 10,
    "Dairyandalternatives": 10,
    "Sodium": 10,
    "Sugar": 10,
    "Alcohol": 5,
    "Fats": 5,
    "Water": 5,
    "Grainsandcereals": 5,
    "Wholegrains": 5,
    "Fruits": 5,
    "Vegetables": 5,
}

DEFAULT_MAX_SCORE = 5
TOTAL_MAX_SCORE = 100
DEFAULT_SEX = "Male"


def max_score_for(category: str) -> int:
    return CATEGORY_MAX_SCORES.get(category, DEFAULT_MAX_SCORE)


def _is_male(sex: Optional[str]) -> bool:
    return (sex or DEFAULT_SEX).strip().lower() == "male"


class ScoreCalculator:
    """Sums sex-specific HEIFA sub-scores for one user row.

    The dataset is re-read (through the content-keyed cache) on every call, so a
    replaced CSV is picked up without restarting.
    """

    def __init__(self, data_file: Optional[Path] = None) -> None:
        self.data_file = Path(data_file) if data_file is not None else settings.data_file

    def _table(self) -> UserTable:
        return load_user_table(self.data_file)

    def total_score(self, user_id: str, sex: Optional[str], selected: Iterable[str]) -> float:
        """Score for the questionnaire selection; 0 for an unknown user.

        Unknown category names are skipped. ``sex`` defaults to Male; any
        other value picks the female column.
        """
        table = self._table()
        row = table.find_row((user_id or "").strip())
        if row is None:
            return 0.0

        use_male = _is_male(sex)
        cells: List[str] = []
        chosen = set(selected or ())
        # Summed in table order, whatever order the selection arrives in.
        for category, columns in QUESTIONNAIRE_COLUMNS.items():
            if category not in chosen:
                continue
            column = columns[0] if use_male else columns[1]
            idx = table.column_index(column)
            if 0 <= idx < len(row):
                cells.append(row[idx])
        return sum_score_cells(cells)

    def category_breakdown(self, user_id: str) -> Dict[str, float]:
        """Per-category insights scores, using the sex recorded on the user's row.

        A category covers every header containing its name (case-insensitive)
        whose suffix matches the row's sex, so one category may sum several
        columns and another may match none.
        """
        table = self._table()
        row = table.find_row((user_id or "").strip())
        if row is None:
            return {}

        sex = table.sex_of(row)
        scores: Dict[str, float] = {}
        for category in CATEGORY_MAX_SCORES:
            needle = category.lower()
            cells: List[str] = []
            for idx, column in enumerate(table.header):
                if needle not in column.lower():
                    continue
                if not ((sex == "Male" and column.endswith("Male")) or (sex == "Female" and column.endswith("Female"))):
                    continue
                if idx < len(row):
                    cells.append(row[idx])
            scores[category] = sum_score_cells(cells)
        return scores
