"""Error types for recipebook.

These are ordinary exceptions so they can carry a message and be logged with
context, but the collection and dispatcher pass them around as ``Err`` values
(see ``results``) rather than raising them across component boundaries.
"""

from enum import Enum


class RecipeBookError(Exception):
    """Base class for every user-facing recipebook error."""


class IncompleteInputError(RecipeBookError):
    """A command that needs a description was given none."""


class NumberFormatError(RecipeBookError):
    """Text that should be an integer is not."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"'{text}' is not a valid number.")


class OutOfIndexReason(str, Enum):
    """Why an index was rejected."""
    NO_ITEMS = "no_items"
    EXCEEDED = "exceeded"
    OUT_OF_RANGE = "out_of_range"


class OutOfIndexError(RecipeBookError):
    """An index falls outside the valid 1-based range."""

    def __init__(self, message: str, reason: OutOfIndexReason = OutOfIndexReason.OUT_OF_RANGE):
        self.reason = reason
        super().__init__(message)


class MalformedEditError(RecipeBookError):
    """Edit syntax could not be split into target, indices and payload."""


class EmptyCollectionError(RecipeBookError):
    """The operation needs at least one recipe."""


class RecipeParseError(RecipeBookError):
    """An ADD description could not be parsed into a recipe."""


class StorageError(RecipeBookError):
    """The save file could not be read or written."""


# User-facing messages
NO_STEPS_ERROR = "This recipe has no steps to edit."
NO_INGREDIENTS_ERROR = "This recipe has no ingredients to edit."
STEP_INDEX_EXCEEDED = "The step number you entered is out of range."
INGREDIENT_INDEX_EXCEEDED = "The ingredient number you entered is out of range."
