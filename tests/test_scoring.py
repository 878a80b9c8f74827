# -*- coding: utf-8 -*-

from __future__ import annotations

import os
import shutil
import tempfile
import unittest
from pathlib import Path

from nutritrack.data_loader import DatasetUnavailableError
from nutritrack.scoring.calculator import CATEGORY_MAX_SCORES, QUESTIONNAIRE_COLUMNS, ScoreCalculator

HEADER = ",".join(
    [
        "phone number",
        "User_ID",
        "Sex",
        "VegetablesHEIFAscoreMale",
        "VegetablesHEIFAscoreFemale",
        "FruitHEIFAscoreMale",
        "FruitHEIFAscoreFemale",
        "SugarHEIFAscoreMale",
        "SugarHEIFAscoreFemale",
        "SodiumHEIFAscoreMale",
        "SodiumHEIFAscoreFemale",
    ]
)

ROSTER = "\n".join(
    [
        HEADER,
        "0400000000,U1,Male,5,3,4,2,7,6,9,8",
        "0400000001,U2,Female,1,4,2,5,3,10,2,6",
        "0400000002,U3,Male,abc,3,4,2,,6,9,8",
        "0400000003,U4,Male,5",
        "0400000009,U1,Female,0,0,0,0,0,0,0,0",
        "x",
    ]
)


class TestTotalScore(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = Path(tempfile.mkdtemp(prefix="nutritrack-score-"))
        self.csv = self._tmp / "user_data.csv"
        self.csv.write_text(ROSTER, encoding="utf-8")
        self.calc = ScoreCalculator(self.csv)

    def tearDown(self) -> None:
        shutil.rmtree(self._tmp, ignore_errors=True)

    def test_sex_selects_column(self) -> None:
        self.assertEqual(self.calc.total_score("U1", "Male", {"Vegetables"}), 5.0)
        self.assertEqual(self.calc.total_score("U1", "Female", {"Vegetables"}), 3.0)
        self.assertEqual(self.calc.total_score("U1", "FEMALE", {"Vegetables"}), 3.0)
        self.assertEqual(self.calc.total_score("U1", "male", {"Vegetables"}), 5.0)

    def test_sex_defaults_to_male(self) -> None:
        self.assertEqual(self.calc.total_score("U1", None, {"Vegetables"}), 5.0)
        self.assertEqual(self.calc.total_score("U1", "", {"Vegetables"}), 5.0)

    def test_sums_selected_categories(self) -> None:
        self.assertEqual(self.calc.total_score("U1", "Male", {"Vegetables", "Fruits", "Sweets"}), 16.0)
        self.assertEqual(self.calc.total_score("U2", "Female", {"Vegetables", "Sweets"}), 14.0)

    def test_empty_selection_is_zero(self) -> None:
        self.assertEqual(self.calc.total_score("U1", "Male", set()), 0.0)
        self.assertEqual(self.calc.total_score("U2", "Female", []), 0.0)

    def test_unknown_user_is_zero(self) -> None:
        self.assertEqual(self.calc.total_score("nobody", "Male", set(QUESTIONNAIRE_COLUMNS)), 0.0)

    def test_unknown_categories_are_skipped(self) -> None:
        self.assertEqual(self.calc.total_score("U1", "Male", {"Vegetables", "Pizza"}), 5.0)

    def test_missing_columns_contribute_nothing(self) -> None:
        # Grains has no column in this header; U4's row is truncated after one score.
        self.assertEqual(self.calc.total_score("U1", "Male", {"Grains", "Vegetables"}), 5.0)
        self.assertEqual(self.calc.total_score("U4", "Male", {"Vegetables", "Fruits"}), 5.0)

    def test_malformed_cells_count_as_zero(self) -> None:
        self.assertEqual(self.calc.total_score("U3", "Male", {"Vegetables"}), 0.0)
        self.assertEqual(self.calc.total_score("U3", "Male", {"Vegetables", "Fruits", "Sweets"}), 4.0)

    def test_first_matching_row_wins(self) -> None:
        self.assertEqual(self.calc.total_score("U1", "Female", {"Sweets"}), 6.0)

    def test_monotonic_in_selection(self) -> None:
        for user_id, sex in (("U1", "Male"), ("U2", "Female"), ("U3", "Male")):
            selected = set()
            previous = self.calc.total_score(user_id, sex, selected)
            for category in QUESTIONNAIRE_COLUMNS:
                selected.add(category)
                current = self.calc.total_score(user_id, sex, selected)
                self.assertGreaterEqual(current, previous)
                previous = current

    def test_reload_picks_up_replaced_file(self) -> None:
        self.assertEqual(self.calc.total_score("U1", "Male", {"Vegetables"}), 5.0)
        self.csv.write_text(ROSTER.replace("0400000000,U1,Male,5,", "0400000000,U1,Male,2.5,"), encoding="utf-8")
        self.assertEqual(self.calc.total_score("U1", "Male", {"Vegetables"}), 2.5)

    def test_same_size_rewrite_with_preserved_mtime_is_reloaded(self) -> None:
        self.assertEqual(self.calc.total_score("U1", "Male", {"Vegetables"}), 5.0)
        before = self.csv.stat()
        self.csv.write_text(ROSTER.replace("0400000000,U1,Male,5,", "0400000000,U1,Male,2,"), encoding="utf-8")
        os.utime(self.csv, ns=(before.st_atime_ns, before.st_mtime_ns))
        self.assertEqual(self.csv.stat().st_size, before.st_size)
        self.assertEqual(self.calc.total_score("U1", "Male", {"Vegetables"}), 2.0)

    def test_selection_order_does_not_change_total(self) -> None:
        csv = self._tmp / "large.csv"
        csv.write_text(
            "\n".join([HEADER, "0400000000,U1,Male,1e16,3,1,2,1,6,9,8"]),
            encoding="utf-8",
        )
        calc = ScoreCalculator(csv)
        forward = calc.total_score("U1", "Male", ["Vegetables", "Fruits", "Sweets"])
        backward = calc.total_score("U1", "Male", ["Sweets", "Fruits", "Vegetables"])
        self.assertEqual(forward, backward)
        self.assertEqual(calc.total_score("U1", "Male", {"Sweets", "Vegetables", "Fruits"}), forward)

    def test_missing_dataset_is_fatal(self) -> None:
        with self.assertRaises(DatasetUnavailableError):
            ScoreCalculator(self._tmp / "missing.csv").total_score("U1", "Male", {"Vegetables"})


class TestCategoryBreakdown(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = Path(tempfile.mkdtemp(prefix="nutritrack-breakdown-"))
        self.csv = self._tmp / "user_data.csv"
        self.csv.write_text(ROSTER, encoding="utf-8")
        self.calc = ScoreCalculator(self.csv)

    def tearDown(self) -> None:
        shutil.rmtree(self._tmp, ignore_errors=True)

    def test_covers_every_category_in_order(self) -> None:
        breakdown = self.calc.category_breakdown("U1")
        self.assertEqual(list(breakdown), list(CATEGORY_MAX_SCORES))

    def test_uses_sex_from_row(self) -> None:
        male = self.calc.category_breakdown("U1")
        self.assertEqual(male["Vegetables"], 5.0)
        self.assertEqual(male["Sugar"], 7.0)
        self.assertEqual(male["Sodium"], 9.0)

        female = self.calc.category_breakdown("U2")
        self.assertEqual(female["Vegetables"], 4.0)
        self.assertEqual(female["Sugar"], 10.0)
        self.assertEqual(female["Sodium"], 6.0)

    def test_unmatched_categories_score_zero(self) -> None:
        breakdown = self.calc.category_breakdown("U1")
        # "Fruits" is not a substring of "FruitHEIFAscoreMale".
        self.assertEqual(breakdown["Fruits"], 0.0)
        self.assertEqual(breakdown["Discretionary"], 0.0)

    def test_malformed_cells_count_as_zero(self) -> None:
        breakdown = self.calc.category_breakdown("U3")
        self.assertEqual(breakdown["Vegetables"], 0.0)
        self.assertEqual(breakdown["Sugar"], 0.0)
        self.assertEqual(breakdown["Sodium"], 9.0)

    def test_unknown_user_is_empty(self) -> None:
        self.assertEqual(self.calc.category_breakdown("nobody"), {})

    def test_substring_match_sums_every_matching_column(self) -> None:
        csv = self._tmp / "overlap.csv"
        csv.write_text(
            "\n".join(
                [
                    "phone number,User_ID,Sex,AlcoholHEIFAscoreMale,AlcoholservesMale,AlcoholHEIFAscoreFemale,TransFatsMale,FatsHEIFAscoreMale",
                    "0400000000,U1,Male,5,2,4,1,3",
                ]
            ),
            encoding="utf-8",
        )
        breakdown = ScoreCalculator(csv).category_breakdown("U1")
        self.assertEqual(breakdown["Alcohol"], 7.0)
        self.assertEqual(breakdown["Fats"], 4.0)

    def test_unrecognised_row_sex_matches_nothing(self) -> None:
        csv = self._tmp / "sex.csv"
        csv.write_text(
            "phone number,User_ID,Sex,VegetablesHEIFAscoreMale,VegetablesHEIFAscoreFemale\n0400000000,U1,male,5,3\n",
            encoding="utf-8",
        )
        breakdown = ScoreCalculator(csv).category_breakdown("U1")
        self.assertEqual(breakdown["Vegetables"], 0.0)


class TestBundledDataset(unittest.TestCase):
    def test_has_every_questionnaire_column(self) -> None:
        import nutritrack  # noqa: WPS433

        from nutritrack.data_loader import load_user_table  # noqa: WPS433

        table = load_user_table(Path(nutritrack.__file__).resolve().parent / "data" / "user_data.csv")
        for male_col, female_col in QUESTIONNAIRE_COLUMNS.values():
            self.assertGreaterEqual(table.column_index(male_col), 0, male_col)
            self.assertGreaterEqual(table.column_index(female_col), 0, female_col)
        self.assertTrue(all(len(row) == len(table.header) for row in table.rows))


if __name__ == "__main__":
    unittest.main()
