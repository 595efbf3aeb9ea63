import pytest
from pydantic import ValidationError

from recipebook.errors import NO_STEPS_ERROR, OutOfIndexError, OutOfIndexReason
from recipebook.models import Ingredient, IngredientList, Recipe, Step, StepList
from recipebook.results import Err, Ok

from conftest import make_recipe


def test_ingredient_str_includes_quantity_when_present():
    assert str(Ingredient(name="flour", quantity="200g")) == "flour (200g)"
    assert str(Ingredient(name="salt")) == "salt"


def test_blank_names_are_rejected():
    with pytest.raises(ValidationError):
        Ingredient(name="")
    with pytest.raises(ValidationError):
        Recipe(name="", tag="dinner")


def test_lists_default_to_empty():
    recipe = Recipe(name="Toast", tag="breakfast")
    assert recipe.ingredients.count == 0
    assert recipe.steps.count == 0


def test_locate_on_empty_list_reports_no_items():
    outcome = StepList().locate(1)
    assert isinstance(outcome, Err)
    assert isinstance(outcome.error, OutOfIndexError)
    assert outcome.error.reason is OutOfIndexReason.NO_ITEMS
    assert outcome.message == NO_STEPS_ERROR


@pytest.mark.parametrize("number", [0, -1, 3, 10])
def test_locate_outside_range_reports_exceeded(number):
    steps = StepList([Step(description="one"), Step(description="two")])
    outcome = steps.locate(number)
    assert isinstance(outcome, Err)
    assert outcome.error.reason is OutOfIndexReason.EXCEEDED


def test_locate_converts_to_zero_based():
    ingredients = IngredientList([Ingredient(name="a"), Ingredient(name="b")])
    assert ingredients.locate(1) == Ok(0)
    assert ingredients.locate(2) == Ok(1)


def test_replace_returns_previous_item_and_keeps_order():
    steps = StepList([Step(description="one"), Step(description="two"), Step(description="three")])
    old = steps.replace(1, Step(description="TWO"))
    assert old.description == "two"
    assert [step.description for step in steps] == ["one", "TWO", "three"]


@pytest.mark.parametrize(
    "term,expected",
    (
        ("cake", True),
        ("CAKE", True),
        ("dess", True),
        ("bread", False),
        ("", False),
        ("   ", False),
    ),
)
def test_recipe_matches_name_or_tag_ignoring_case(term, expected):
    recipe = make_recipe("Chocolate Cake", tag="Dessert")
    assert recipe.matches(term) is expected
