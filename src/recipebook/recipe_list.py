"""The in-memory recipe collection."""

from typing import Iterator, List, Optional

from .errors import EmptyCollectionError, OutOfIndexError, OutOfIndexReason
from .logger import get_logger
from .models import Recipe
from .results import Err, Ok, Outcome

logger = get_logger("recipe_list")


class RecipeList:
    """Ordered recipes addressed by 1-based display index.

    ``total_added`` counts every recipe ever added and is only used for
    display numbering; it never shrinks on delete or clear.
    """

    def __init__(self, recipes: Optional[List[Recipe]] = None, total_added: int = 0):
        self._recipes: List[Recipe] = list(recipes or [])
        self.total_added = max(total_added, len(self._recipes))

    @property
    def recipes(self) -> List[Recipe]:
        """A copy of the current recipes, in order."""
        return list(self._recipes)

    def add(self, recipe: Recipe) -> None:
        self._recipes.append(recipe)
        self.total_added += 1
        logger.debug(f"Added recipe '{recipe.name}' (total added: {self.total_added})")

    def _check_index(self, index: int) -> Optional[Err]:
        if index < 1 or index > len(self._recipes):
            if not self._recipes:
                message = "There are no recipes in the list yet."
            else:
                message = f"Recipe index must be between 1 and {len(self._recipes)}."
            return Err(OutOfIndexError(message, OutOfIndexReason.OUT_OF_RANGE))
        return None

    def get(self, index: int) -> Outcome[Recipe]:
        """Look up the recipe at 1-based ``index``."""
        failure = self._check_index(index)
        if failure:
            return failure
        return Ok(self._recipes[index - 1])

    def remove(self, index: int) -> Outcome[Recipe]:
        """Remove the recipe at 1-based ``index``; later recipes shift left."""
        failure = self._check_index(index)
        if failure:
            return failure
        recipe = self._recipes.pop(index - 1)
        logger.debug(f"Removed recipe '{recipe.name}' from position {index}")
        return Ok(recipe)

    def clear(self) -> None:
        self._recipes.clear()
        logger.debug("Cleared recipe list")

    def search(self, term: str) -> Iterator[Recipe]:
        """Yield recipes whose name or tag contains ``term``, ignoring case.

        Each call returns a fresh generator over the current recipes.
        """
        return (recipe for recipe in list(self._recipes) if recipe.matches(term))

    def newest(self) -> Outcome[Recipe]:
        if not self._recipes:
            return Err(EmptyCollectionError("There are no recipes in the list yet."))
        return Ok(self._recipes[-1])

    def __len__(self) -> int:
        return len(self._recipes)

    def __iter__(self) -> Iterator[Recipe]:
        return iter(list(self._recipes))
