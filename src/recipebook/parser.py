"""Turns raw user text into commands and recipe data.

Recipe syntax for ``add``::

    add n/NAME i/INGREDIENT[:QUANTITY], ... t/TAG s/NUMBER_OF_STEPS

Prefixes may come in any order but each must appear exactly once. The steps
themselves are typed in one per prompt after the command is accepted.

Edit syntax for ``edit``::

    edit --i RECIPE_INDEX INGREDIENT_INDEX NEW_INGREDIENT[:QUANTITY]
    edit --s RECIPE_INDEX STEP_INDEX NEW_STEP_TEXT
"""

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List

from .commands import (
    KEYWORDS,
    AddCommand,
    ClearCommand,
    Command,
    CommandType,
    DeleteCommand,
    EditCommand,
    EditIngredientCommand,
    EditStepCommand,
    EditTarget,
    ExitCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    UnknownCommand,
    ViewCommand,
)
from .errors import MalformedEditError, NumberFormatError, RecipeParseError
from .logger import get_logger
from .models import Ingredient, IngredientList, Step, StepList
from .results import capture

if TYPE_CHECKING:
    from .ui import UI

logger = get_logger("parser")

QUIT_KEYWORD = "quit"

NAME_PREFIX = "n"
INGREDIENTS_PREFIX = "i"
TAG_PREFIX = "t"
STEPS_PREFIX = "s"
RECIPE_PREFIXES = (NAME_PREFIX, INGREDIENTS_PREFIX, TAG_PREFIX, STEPS_PREFIX)

_PREFIX_PATTERN = re.compile(r"(?:^|\s)([nits])/")

ADD_USAGE = "Usage: add n/NAME i/INGREDIENT[:QUANTITY], ... t/TAG s/NUMBER_OF_STEPS"
EDIT_USAGE = "Usage: edit --i|--s RECIPE_INDEX ITEM_INDEX NEW_TEXT"


@dataclass(frozen=True)
class ParsedRecipe:
    """Fields of an ``add`` description, before steps are collected."""
    name: str
    ingredients: IngredientList
    tag: str
    step_count: int


@dataclass(frozen=True)
class EditRequest:
    """A one-line ``edit`` broken into its parts."""
    target: EditTarget
    recipe_index: int
    item_index: int
    text: str


def parse_command(line: str) -> Command:
    """Split a line into keyword and description and build the command."""
    parts = line.split(maxsplit=1)
    keyword = parts[0] if parts else ""
    description = parts[1].strip() if len(parts) > 1 else ""
    kind = KEYWORDS.get(keyword.lower(), CommandType.UNKNOWN)

    if kind is CommandType.LIST:
        return ListCommand()
    if kind is CommandType.ADD:
        return AddCommand(description)
    if kind is CommandType.DELETE:
        return DeleteCommand(description)
    if kind is CommandType.CLEAR:
        return ClearCommand()
    if kind is CommandType.VIEW:
        return ViewCommand(description)
    if kind is CommandType.FIND:
        return FindCommand(description)
    if kind is CommandType.EDIT_STEP:
        return EditStepCommand(description)
    if kind is CommandType.EDIT_INGREDIENT:
        return EditIngredientCommand(description)
    if kind is CommandType.EDIT:
        return EditCommand(description)
    if kind is CommandType.HELP:
        return HelpCommand()
    if kind is CommandType.EXIT:
        return ExitCommand()
    return UnknownCommand(keyword)


def _split_prefixed(description: str) -> Dict[str, str]:
    matches = list(_PREFIX_PATTERN.finditer(description))
    if not matches:
        raise RecipeParseError(f"Could not find any recipe fields. {ADD_USAGE}")
    if description[:matches[0].start()].strip():
        raise RecipeParseError(f"Unexpected text before the first field. {ADD_USAGE}")

    fields: Dict[str, str] = {}
    for position, match in enumerate(matches):
        prefix = match.group(1)
        if prefix in fields:
            raise RecipeParseError(f"Field '{prefix}/' was given more than once.")
        end = matches[position + 1].start() if position + 1 < len(matches) else len(description)
        fields[prefix] = description[match.end():end].strip()

    missing = [f"{prefix}/" for prefix in RECIPE_PREFIXES if prefix not in fields]
    if missing:
        raise RecipeParseError(f"Missing field(s) {', '.join(missing)}. {ADD_USAGE}")
    return fields


@capture
def parse_recipe(description: str) -> ParsedRecipe:
    """Parse an ``add`` description into name, ingredients, tag and step count."""
    fields = _split_prefixed(description)

    name = fields[NAME_PREFIX]
    tag = fields[TAG_PREFIX]
    if not name:
        raise RecipeParseError("The recipe name cannot be empty.")
    if not tag:
        raise RecipeParseError("The recipe tag cannot be empty.")

    try:
        step_count = int(fields[STEPS_PREFIX])
    except ValueError:
        raise RecipeParseError(f"Number of steps must be a whole number, got '{fields[STEPS_PREFIX]}'.")
    if step_count < 0:
        raise RecipeParseError("Number of steps cannot be negative.")

    ingredients = parse_ingredients(fields[INGREDIENTS_PREFIX]).unwrap()
    logger.debug(f"Parsed recipe '{name}' with {ingredients.count} ingredients and {step_count} steps")
    return ParsedRecipe(name=name, ingredients=ingredients, tag=tag, step_count=step_count)


def _ingredient_from_text(text: str) -> Ingredient:
    name, _, quantity = text.partition(":")
    name = name.strip()
    if not name:
        raise RecipeParseError(f"Ingredient '{text.strip()}' has no name.")
    return Ingredient(name=name, quantity=quantity.strip() or None)


@capture
def parse_ingredient(text: str) -> Ingredient:
    """Parse ``name`` or ``name:quantity``."""
    return _ingredient_from_text(text)


@capture
def parse_ingredients(text: str) -> IngredientList:
    """Parse a comma-separated ingredient list. Blank entries are skipped."""
    entries: List[Ingredient] = [
        _ingredient_from_text(entry) for entry in text.split(",") if entry.strip()
    ]
    return IngredientList(entries)


@capture
def parse_index(text: str) -> int:
    """Parse a display index typed by the user."""
    try:
        return int(text.strip())
    except ValueError:
        raise NumberFormatError(text.strip())


@capture
def parse_edit(description: str) -> EditRequest:
    """Parse the one-line ``edit`` syntax."""
    parts = description.split(maxsplit=3)
    if len(parts) < 4:
        raise MalformedEditError(f"Incomplete edit command. {EDIT_USAGE}")

    flag, recipe_text, item_text, text = parts
    try:
        target = EditTarget(flag.lower())
    except ValueError:
        raise MalformedEditError(f"Unknown edit target '{flag}', expected --i or --s. {EDIT_USAGE}")

    try:
        recipe_index = int(recipe_text)
        item_index = int(item_text)
    except ValueError:
        raise MalformedEditError(f"Recipe and item indexes must be numbers. {EDIT_USAGE}")

    return EditRequest(target=target, recipe_index=recipe_index, item_index=item_index, text=text.strip())


def read_text(ui: "UI", prompt: str) -> str:
    """Prompt until the user types something non-blank."""
    while True:
        text = ui.read_line(prompt)
        if text:
            return text
        ui.show_blank_input()


def read_steps(ui: "UI", step_count: int) -> StepList:
    """Interactively collect ``step_count`` steps."""
    steps = StepList()
    for number in range(1, step_count + 1):
        steps.add(Step(description=read_text(ui, f"Step {number}")))
    return steps
