"""Command dispatch: validates each command, mutates the recipe list, renders
the outcome and writes the save file.

Every branch runs inside a local failure boundary (``_attempt``) and yields an
``Ok``/``Err`` outcome which is matched into a UI call. Nothing raised inside a
branch reaches the caller except ``EOFError`` from a prompt, so a bad command
never ends the session.

Commands in ``MUTATING_COMMANDS`` save once after their branch finishes, whether
or not it succeeded. A failed ``add`` therefore still rewrites the save file
with the unchanged list. Answering ``quit`` at an edit prompt ends the command
without saving.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Protocol, Tuple, TypeVar, Union, assert_never

from .commands import (
    AddCommand,
    ClearCommand,
    Command,
    DeleteCommand,
    EditCommand,
    EditIngredientCommand,
    EditStepCommand,
    EditTarget,
    ExitCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    MUTATING_COMMANDS,
    UnknownCommand,
    ViewCommand,
)
from .errors import IncompleteInputError, OutOfIndexError, OutOfIndexReason, RecipeBookError
from .logger import clear_command_id, get_logger, set_command_id
from .models import Ingredient, Recipe, Step
from .parser import (
    QUIT_KEYWORD,
    parse_edit,
    parse_index,
    parse_ingredient,
    parse_recipe,
    read_steps,
    read_text,
)
from .recipe_list import RecipeList
from .results import Err, Ok, Outcome
from .ui import UI

logger = get_logger("dispatcher")

T = TypeVar("T")


class RecipeSink(Protocol):
    """Anything that can persist the whole recipe list."""

    def save(self, recipes: RecipeList) -> Outcome: ...


@dataclass(frozen=True)
class ItemEdit:
    """A completed in-place edit of one step or ingredient."""
    recipe: Recipe
    target: EditTarget
    number: int
    old: Union[Step, Ingredient]
    new: Union[Step, Ingredient]


class CommandDispatcher:
    """Applies commands to a recipe list.

    Args:
        recipes: The collection every command operates on.
        storage: Persistence sink, saved after each mutating command.
        ui: Presentation layer for results, errors and prompts.
    """

    def __init__(self, recipes: RecipeList, storage: RecipeSink, ui: UI):
        self.recipes = recipes
        self.storage = storage
        self.ui = ui

    def execute(self, command: Command) -> bool:
        """Run ``command``. Returns True when the session should end."""
        set_command_id()
        logger.info(f"Executing {command.kind.value}")
        try:
            completed = self._dispatch(command)
            if completed and command.kind in MUTATING_COMMANDS:
                self._save()
        finally:
            clear_command_id()
        return isinstance(command, ExitCommand)

    def _dispatch(self, command: Command) -> bool:
        """Run the branch for ``command``. False means the user cancelled it."""
        match command:
            case ListCommand():
                self.ui.show_recipe_list(self.recipes)

            case AddCommand(description):
                match self._attempt(self._add, description):
                    case Ok(recipe):
                        self.ui.show_recipe_added(recipe, len(self.recipes), self.recipes.total_added)
                    case Err(error):
                        self._report("Error adding recipe", error)

            case DeleteCommand(description):
                match self._attempt(self._delete, description):
                    case Ok(recipe):
                        self.ui.show_recipe_deleted(recipe, len(self.recipes))
                    case Err(error):
                        self._report("Error deleting recipe", error)

            case ClearCommand():
                self.recipes.clear()
                self.ui.show_recipe_list_cleared()

            case ViewCommand(description):
                match self._attempt(self._view, description):
                    case Ok(recipe):
                        self.ui.show_recipe_viewed(recipe)
                    case Err(error):
                        self._report("Error viewing recipe", error)

            case FindCommand(description):
                self.ui.show_search_results(description, self._find(description))

            case EditStepCommand(description):
                return self._finish_edit(self._attempt(self._edit_step, description))

            case EditIngredientCommand(description):
                return self._finish_edit(self._attempt(self._edit_ingredient, description))

            case EditCommand(description):
                return self._finish_edit(self._attempt(self._edit, description))

            case HelpCommand():
                self.ui.show_help()

            case ExitCommand():
                self.ui.show_exit()

            case UnknownCommand(keyword):
                self.ui.show_unrecognized(keyword)

            case _:
                assert_never(command)

        return True

    def _attempt(self, handler: Callable[[str], T], description: str) -> "Outcome[T]":
        """Local failure boundary around one branch."""
        try:
            return Ok(handler(description))
        except RecipeBookError as error:
            return Err(error)
        except EOFError:
            raise
        except Exception as e:
            logger.exception(f"Unexpected error in {handler.__name__}: {e}")
            return Err(RecipeBookError(f"Unexpected error: {e}"))

    def _report(self, heading: str, error: RecipeBookError) -> None:
        logger.warning(f"{heading}: {error}")
        self.ui.show_error(heading, error)

    def _save(self) -> None:
        outcome = self.storage.save(self.recipes)
        if isinstance(outcome, Err):
            self._report("Error saving recipes", outcome.error)

    def _finish_edit(self, outcome: "Outcome[Optional[ItemEdit]]") -> bool:
        match outcome:
            case Ok(None):
                self.ui.show_edit_cancelled()
                return False
            case Ok(ItemEdit(target=EditTarget.STEP) as edit):
                self.ui.show_step_edited(edit.recipe, edit.number, edit.old, edit.new)
            case Ok(ItemEdit(target=EditTarget.INGREDIENT) as edit):
                self.ui.show_ingredient_edited(edit.recipe, edit.number, edit.old, edit.new)
            case Err(error):
                self._report("Error editing recipe", error)
        return True

    def _recipe_index(self, description: str, verb: str) -> int:
        if not description:
            raise IncompleteInputError(f"The index of {verb} cannot be empty.")
        return parse_index(description).unwrap()

    def _add(self, description: str) -> Recipe:
        if not description:
            raise IncompleteInputError("The description of add cannot be empty.")
        parsed = parse_recipe(description).unwrap()
        steps = read_steps(self.ui, parsed.step_count)
        self.recipes.add(Recipe(
            name=parsed.name,
            tag=parsed.tag,
            ingredients=parsed.ingredients,
            steps=steps,
        ))
        return self.recipes.newest().unwrap()

    def _delete(self, description: str) -> Recipe:
        index = self._recipe_index(description, "delete")
        return self.recipes.remove(index).unwrap()

    def _view(self, description: str) -> Recipe:
        index = self._recipe_index(description, "view")
        return self.recipes.get(index).unwrap()

    def _find(self, term: str) -> List[Tuple[int, Recipe]]:
        positions = {id(recipe): index for index, recipe in enumerate(self.recipes, 1)}
        return [(positions[id(recipe)], recipe) for recipe in self.recipes.search(term)]

    def _edit_step(self, description: str) -> Optional[ItemEdit]:
        recipe = self.recipes.get(self._recipe_index(description, "editstep")).unwrap()
        steps = recipe.steps
        if steps.count == 0:
            raise OutOfIndexError(steps.empty_message, OutOfIndexReason.NO_ITEMS)

        self.ui.show_step_list(steps)
        answer = self.ui.read_line(f"Step number to edit (or '{QUIT_KEYWORD}')")
        if answer == QUIT_KEYWORD:
            return None
        number = parse_index(answer).unwrap()
        position = steps.locate(number).unwrap()

        new = Step(description=read_text(self.ui, f"New text for step {number}"))
        old = steps.replace(position, new)
        logger.info(f"Edited step {number} of '{recipe.name}'")
        return ItemEdit(recipe, EditTarget.STEP, number, old, new)

    def _edit_ingredient(self, description: str) -> Optional[ItemEdit]:
        recipe = self.recipes.get(self._recipe_index(description, "editingredient")).unwrap()
        ingredients = recipe.ingredients
        if ingredients.count == 0:
            raise OutOfIndexError(ingredients.empty_message, OutOfIndexReason.NO_ITEMS)

        self.ui.show_ingredient_list(ingredients)
        answer = self.ui.read_line(f"Ingredient number to edit (or '{QUIT_KEYWORD}')")
        if answer == QUIT_KEYWORD:
            return None
        number = parse_index(answer).unwrap()
        position = ingredients.locate(number).unwrap()

        text = read_text(self.ui, f"New ingredient {number} (name[:quantity])")
        new = parse_ingredient(text).unwrap()
        old = ingredients.replace(position, new)
        logger.info(f"Edited ingredient {number} of '{recipe.name}'")
        return ItemEdit(recipe, EditTarget.INGREDIENT, number, old, new)

    def _edit(self, description: str) -> ItemEdit:
        request = parse_edit(description).unwrap()
        recipe = self.recipes.get(request.recipe_index).unwrap()

        if request.target is EditTarget.INGREDIENT:
            position = recipe.ingredients.locate(request.item_index).unwrap()
            new = parse_ingredient(request.text).unwrap()
            old = recipe.ingredients.replace(position, new)
        else:
            position = recipe.steps.locate(request.item_index).unwrap()
            new = Step(description=request.text)
            old = recipe.steps.replace(position, new)

        logger.info(f"Edited {request.target.name.lower()} {request.item_index} of '{recipe.name}'")
        return ItemEdit(recipe, request.target, request.item_index, old, new)
