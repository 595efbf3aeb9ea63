import io
import os
import tempfile
from pathlib import Path
from typing import Iterable, List

# Keep logs and profile data out of the checkout
os.environ.setdefault("RECIPEBOOK_HOME", tempfile.mkdtemp(prefix="recipebook-tests-"))

import pytest
from rich.console import Console

from recipebook.dispatcher import CommandDispatcher
from recipebook.models import Ingredient, IngredientList, Recipe, Step, StepList
from recipebook.recipe_list import RecipeList
from recipebook.results import Ok
from recipebook.ui import UI


class ScriptedInput:
    """Feeds prepared lines to UI.read_line and records the prompts."""

    def __init__(self, lines: Iterable[str] = ()):
        self.lines: List[str] = list(lines)
        self.prompts: List[str] = []

    def feed(self, *lines: str) -> None:
        self.lines.extend(lines)

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


class RecordingStorage:
    """Stands in for RecipeStorage and remembers what each save saw."""

    def __init__(self):
        self.saves: List[List[str]] = []

    def save(self, recipes: RecipeList):
        self.saves.append([recipe.name for recipe in recipes])
        return Ok(Path("memory"))


def make_recipe(name: str, tag: str = "dinner", ingredients=("salt",), steps=("Cook it",)) -> Recipe:
    return Recipe(
        name=name,
        tag=tag,
        ingredients=IngredientList([Ingredient(name=item) for item in ingredients]),
        steps=StepList([Step(description=text) for text in steps]),
    )


@pytest.fixture
def scripted_input() -> ScriptedInput:
    return ScriptedInput()


@pytest.fixture
def ui(scripted_input) -> UI:
    console = Console(file=io.StringIO(), width=200, color_system=None)
    return UI(console=console, reader=scripted_input)


@pytest.fixture
def output(ui):
    """Everything rendered so far."""
    return lambda: ui.console.file.getvalue()


@pytest.fixture
def storage() -> RecordingStorage:
    return RecordingStorage()


@pytest.fixture
def recipes() -> RecipeList:
    return RecipeList()


@pytest.fixture
def abc_recipes() -> RecipeList:
    recipe_list = RecipeList()
    for name in ("A", "B", "C"):
        recipe_list.add(make_recipe(name))
    return recipe_list


@pytest.fixture
def dispatcher(recipes, storage, ui) -> CommandDispatcher:
    return CommandDispatcher(recipes, storage, ui)
