"""Save file handling for the recipe list."""

from pathlib import Path
from typing import List

import yaml
from pydantic import BaseModel, Field, ValidationError

from .errors import StorageError
from .logger import get_logger
from .models import Recipe
from .recipe_list import RecipeList
from .results import Err, Ok, Outcome

logger = get_logger("storage")


class SaveFile(BaseModel):
    """On-disk layout of the save file."""

    total_added: int = Field(0, ge=0, description="Recipes ever added")
    recipes: List[Recipe] = Field(default_factory=list)


class RecipeStorage:
    """Reads and overwrites a single YAML save file.

    Every save writes the whole list; there is no partial update.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def save(self, recipes: RecipeList) -> Outcome[Path]:
        """Overwrite the save file with ``recipes``."""
        data = SaveFile(total_added=recipes.total_added, recipes=recipes.recipes)
        output = yaml.safe_dump(
            data.model_dump(mode="json"),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(output, encoding="utf-8")
        except OSError as e:
            logger.warning(f"Failed to save recipes to {self.path}: {e}")
            return Err(StorageError(f"Could not write {self.path}: {e}"))

        logger.info(f"Saved {len(recipes)} recipe(s) to {self.path}")
        return Ok(self.path)

    def load(self) -> Outcome[RecipeList]:
        """Read the save file. A missing file is an empty list."""
        if not self.path.exists():
            logger.info(f"No save file at {self.path}, starting empty")
            return Ok(RecipeList())

        try:
            content = self.path.read_text(encoding="utf-8")
            raw = yaml.safe_load(content) or {}
            data = SaveFile.model_validate(raw)
        except OSError as e:
            logger.warning(f"Failed to read {self.path}: {e}")
            return Err(StorageError(f"Could not read {self.path}: {e}"))
        except yaml.YAMLError as e:
            logger.warning(f"Invalid YAML in {self.path}: {e}")
            return Err(StorageError(f"Invalid YAML in {self.path}: {e}"))
        except ValidationError as e:
            logger.warning(f"Save file {self.path} failed validation: {e}")
            return Err(StorageError(f"Save file {self.path} is not a valid recipe file."))

        logger.info(f"Loaded {len(data.recipes)} recipe(s) from {self.path}")
        return Ok(RecipeList(data.recipes, total_added=data.total_added))
