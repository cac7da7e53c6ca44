"""Tests for category normalization."""

import pytest

from foodbudget.domain.categories import EXPENSE_CATEGORIES, OTHER_CATEGORY, fix_category


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("dairy", "Dairy"),
        ("DAIRY", "Dairy"),
        ("dAiRy", "Dairy"),
        ("ready meals", "Ready meals"),
        ("READY MEALS", "Ready meals"),
        ("restaurant", "Restaurant"),
    ],
)
def test_fix_category_normalizes_case(raw, expected):
    assert fix_category(raw) == expected


@pytest.mark.parametrize("raw", ["", None, "sweets", "Ready Meal", "dairy "])
def test_fix_category_falls_back_to_other(raw):
    assert fix_category(raw) == OTHER_CATEGORY


def test_known_categories_are_fixed_points():
    for category in EXPENSE_CATEGORIES:
        assert fix_category(category) == category


def test_other_is_a_category():
    assert OTHER_CATEGORY in EXPENSE_CATEGORIES
    assert len(EXPENSE_CATEGORIES) == 10
