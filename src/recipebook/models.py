"""Pydantic models for recipe data."""

from typing import ClassVar, Optional

from pydantic import BaseModel, Field, RootModel

from .errors import (
    INGREDIENT_INDEX_EXCEEDED,
    NO_INGREDIENTS_ERROR,
    NO_STEPS_ERROR,
    STEP_INDEX_EXCEEDED,
    OutOfIndexError,
    OutOfIndexReason,
)
from .results import Err, Ok, Outcome


class Ingredient(BaseModel):
    """A single ingredient line."""

    name: str = Field(..., min_length=1, description="Ingredient name")
    quantity: Optional[str] = Field(None, description="Amount, free text")

    def __str__(self) -> str:
        if self.quantity:
            return f"{self.name} ({self.quantity})"
        return self.name


class Step(BaseModel):
    """A single instruction."""

    description: str = Field(..., min_length=1, description="What to do")

    def __str__(self) -> str:
        return self.description


class _IndexedItems:
    """Ordered items addressed by 1-based display number.

    Mixed into the root models below; expects ``self.root`` to be a list.
    """

    empty_message = "There are no items."
    exceeded_message = "Item number out of range."

    @property
    def count(self) -> int:
        return len(self.root)

    def add(self, item) -> None:
        self.root.append(item)

    def get(self, index: int):
        """Return the item at 0-based ``index``."""
        return self.root[index]

    def replace(self, index: int, item):
        """Swap in ``item`` at 0-based ``index``, returning the old one."""
        old = self.root[index]
        self.root[index] = item
        return old

    def locate(self, number: int) -> Outcome[int]:
        """Turn a 1-based display number into a 0-based index."""
        if not self.root:
            return Err(OutOfIndexError(self.empty_message, OutOfIndexReason.NO_ITEMS))
        index = number - 1
        if index < 0 or index >= len(self.root):
            return Err(OutOfIndexError(self.exceeded_message, OutOfIndexReason.EXCEEDED))
        return Ok(index)

    def __iter__(self):
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)


class IngredientList(_IndexedItems, RootModel[list[Ingredient]]):
    root: list[Ingredient] = Field(default_factory=list)

    empty_message: ClassVar[str] = NO_INGREDIENTS_ERROR
    exceeded_message: ClassVar[str] = INGREDIENT_INDEX_EXCEEDED


class StepList(_IndexedItems, RootModel[list[Step]]):
    root: list[Step] = Field(default_factory=list)

    empty_message: ClassVar[str] = NO_STEPS_ERROR
    exceeded_message: ClassVar[str] = STEP_INDEX_EXCEEDED


class Recipe(BaseModel):
    """A named dish with a tag, ingredients and steps."""

    name: str = Field(..., min_length=1, description="Recipe name")
    tag: str = Field(..., min_length=1, description="Category tag, e.g. dinner")
    ingredients: IngredientList = Field(default_factory=IngredientList)
    steps: StepList = Field(default_factory=StepList)

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match on name or tag."""
        needle = term.strip().lower()
        if not needle:
            return False
        return needle in self.name.lower() or needle in self.tag.lower()

    def __str__(self) -> str:
        return f"{self.name} [{self.tag}]"
