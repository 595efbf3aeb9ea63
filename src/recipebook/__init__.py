"""recipebook - a personal recipe manager for the terminal."""

__version__ = "0.1.0"

from .commands import Command, CommandType
from .dispatcher import CommandDispatcher
from .models import Ingredient, IngredientList, Recipe, Step, StepList
from .parser import parse_command
from .recipe_list import RecipeList
from .storage import RecipeStorage
from .ui import UI

__all__ = [
    # Data
    "Ingredient",
    "IngredientList",
    "Recipe",
    "RecipeList",
    "Step",
    "StepList",

    # Commands
    "Command",
    "CommandType",
    "CommandDispatcher",
    "parse_command",

    # Collaborators
    "RecipeStorage",
    "UI",
]
