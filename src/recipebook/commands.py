"""Command variants produced by the parser and consumed by the dispatcher."""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, Union


class CommandType(str, Enum):
    """Every action a user can request."""
    LIST = "list"
    ADD = "add"
    DELETE = "delete"
    CLEAR = "clear"
    VIEW = "view"
    FIND = "find"
    EDIT_STEP = "editstep"
    EDIT_INGREDIENT = "editingredient"
    EDIT = "edit"
    HELP = "help"
    EXIT = "exit"
    UNKNOWN = "unknown"


class EditTarget(str, Enum):
    """What an ``edit`` command changes inside a recipe."""
    INGREDIENT = "--i"
    STEP = "--s"


@dataclass(frozen=True)
class ListCommand:
    kind: ClassVar[CommandType] = CommandType.LIST


@dataclass(frozen=True)
class AddCommand:
    description: str
    kind: ClassVar[CommandType] = CommandType.ADD


@dataclass(frozen=True)
class DeleteCommand:
    description: str
    kind: ClassVar[CommandType] = CommandType.DELETE


@dataclass(frozen=True)
class ClearCommand:
    kind: ClassVar[CommandType] = CommandType.CLEAR


@dataclass(frozen=True)
class ViewCommand:
    description: str
    kind: ClassVar[CommandType] = CommandType.VIEW


@dataclass(frozen=True)
class FindCommand:
    description: str
    kind: ClassVar[CommandType] = CommandType.FIND


@dataclass(frozen=True)
class EditStepCommand:
    description: str
    kind: ClassVar[CommandType] = CommandType.EDIT_STEP


@dataclass(frozen=True)
class EditIngredientCommand:
    description: str
    kind: ClassVar[CommandType] = CommandType.EDIT_INGREDIENT


@dataclass(frozen=True)
class EditCommand:
    description: str
    kind: ClassVar[CommandType] = CommandType.EDIT


@dataclass(frozen=True)
class HelpCommand:
    kind: ClassVar[CommandType] = CommandType.HELP


@dataclass(frozen=True)
class ExitCommand:
    kind: ClassVar[CommandType] = CommandType.EXIT


@dataclass(frozen=True)
class UnknownCommand:
    keyword: str
    kind: ClassVar[CommandType] = CommandType.UNKNOWN


Command = Union[
    ListCommand,
    AddCommand,
    DeleteCommand,
    ClearCommand,
    ViewCommand,
    FindCommand,
    EditStepCommand,
    EditIngredientCommand,
    EditCommand,
    HelpCommand,
    ExitCommand,
    UnknownCommand,
]

# Keyword -> command type. "bye" is accepted as an alias for exit.
KEYWORDS: Dict[str, CommandType] = {kind.value: kind for kind in CommandType if kind is not CommandType.UNKNOWN}
KEYWORDS["bye"] = CommandType.EXIT

# Commands whose branch writes the save file afterwards
MUTATING_COMMANDS = frozenset({
    CommandType.ADD,
    CommandType.DELETE,
    CommandType.CLEAR,
    CommandType.EDIT_STEP,
    CommandType.EDIT_INGREDIENT,
    CommandType.EDIT,
})
