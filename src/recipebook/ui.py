"""Console presentation for recipebook using rich."""

from typing import Callable, Iterable, Optional, Tuple

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from .errors import RecipeBookError
from .models import Ingredient, IngredientList, Recipe, Step, StepList

HELP_TEXT = """
[bold]Recipe Book[/bold]

[cyan]Commands:[/cyan]
  list                                   - Show all recipes
  add n/NAME i/INGREDIENTS t/TAG s/STEPS - Add a recipe, then type each step
                                           (ingredients: name[:quantity], comma-separated)
  view INDEX                             - Show a recipe in full
  delete INDEX                           - Delete a recipe
  clear                                  - Delete every recipe
  find TERM                              - Search names and tags (case-insensitive)
  editstep INDEX                         - Pick a step of a recipe and rewrite it
  editingredient INDEX                   - Pick an ingredient of a recipe and rewrite it
  edit --s INDEX STEP TEXT               - Rewrite a step in one line
  edit --i INDEX INGREDIENT NAME[:QTY]   - Rewrite an ingredient in one line
  help                                   - Show this help message
  exit                                   - Leave the recipe book

[cyan]Example:[/cyan]
  add n/Pasta i/spaghetti:200g, tomato sauce t/dinner s/3
"""


class UI:
    """Renders every command outcome and reads interactive input."""

    def __init__(
        self,
        console: Optional[Console] = None,
        reader: Optional[Callable[[str], str]] = None,
    ):
        """Initialize the UI.

        Args:
            console: Console to render to. Defaults to stdout.
            reader: Function returning the next input line for a prompt.
                Defaults to a rich prompt on the same console.
        """
        self.console = console or Console()
        self._reader = reader or self._prompt

    def _prompt(self, prompt: str) -> str:
        if not prompt:
            return self.console.input("[bold blue]>[/bold blue] ")
        return Prompt.ask(f"[bold blue]{prompt}[/bold blue]", console=self.console)

    def read_line(self, prompt: str = "") -> str:
        """Block until the next line of input arrives. Raises EOFError at end of input."""
        return self._reader(prompt).strip()

    def show_welcome(self, count: int) -> None:
        self.console.print(Panel.fit(
            f"[bold cyan]Recipe Book[/bold cyan]\nYou have {count} recipe(s) saved.\n\nType 'help' for commands",
            border_style="cyan",
        ))

    def show_recipe_list(self, recipes: Iterable[Recipe]) -> None:
        recipes = list(recipes)
        if not recipes:
            self.console.print("[yellow]Your recipe list is empty.[/yellow]")
            return

        table = Table(title="Recipes", show_header=True)
        table.add_column("#", style="cyan", justify="right")
        table.add_column("Name", style="bold")
        table.add_column("Tag", style="green")
        table.add_column("Ingredients", justify="right")
        table.add_column("Steps", justify="right")
        for number, recipe in enumerate(recipes, 1):
            table.add_row(
                str(number), escape(recipe.name), escape(recipe.tag),
                str(recipe.ingredients.count), str(recipe.steps.count),
            )
        self.console.print(table)

    def show_recipe_added(self, recipe: Recipe, count: int, total_added: int) -> None:
        self.console.print(f"[green]✓[/green] Added recipe #{total_added}: {escape(str(recipe))}")
        self.console.print(f"  Now you have {count} recipe(s) in the list.")

    def show_recipe_deleted(self, recipe: Recipe, remaining: int) -> None:
        self.console.print(f"[green]✓[/green] Deleted recipe: {escape(str(recipe))}")
        self.console.print(f"  Now you have {remaining} recipe(s) in the list.")

    def show_recipe_list_cleared(self) -> None:
        self.console.print("[green]✓[/green] All recipes have been cleared.")

    def show_recipe_viewed(self, recipe: Recipe) -> None:
        lines = [f"[bold]Tag:[/bold] {escape(recipe.tag)}", "", "[bold]Ingredients:[/bold]"]
        if recipe.ingredients.count:
            lines += [f"  {number}. {escape(str(ingredient))}" for number, ingredient in enumerate(recipe.ingredients, 1)]
        else:
            lines.append("  [dim]none[/dim]")
        lines += ["", "[bold]Steps:[/bold]"]
        if recipe.steps.count:
            lines += [f"  {number}. {escape(str(step))}" for number, step in enumerate(recipe.steps, 1)]
        else:
            lines.append("  [dim]none[/dim]")

        self.console.print(Panel("\n".join(lines), title=escape(recipe.name), border_style="blue", padding=(1, 2)))

    def show_search_results(self, term: str, matches: Iterable[Tuple[int, Recipe]]) -> None:
        """Show (index, recipe) pairs that matched ``term``."""
        matches = list(matches)
        if not matches:
            self.console.print(f"[yellow]No recipes found matching '{escape(term)}'[/yellow]")
            return

        self.console.print(f"[bold]Recipes matching '{escape(term)}':[/bold]")
        for index, recipe in matches:
            self.console.print(f"  {index}. {escape(str(recipe))}")

    def show_step_list(self, steps: StepList) -> None:
        self.console.print("[bold]Steps:[/bold]")
        for number, step in enumerate(steps, 1):
            self.console.print(f"  {number}. {escape(str(step))}")

    def show_ingredient_list(self, ingredients: IngredientList) -> None:
        self.console.print("[bold]Ingredients:[/bold]")
        for number, ingredient in enumerate(ingredients, 1):
            self.console.print(f"  {number}. {escape(str(ingredient))}")

    def show_step_edited(self, recipe: Recipe, number: int, old: Step, new: Step) -> None:
        self.console.print(f"[green]✓[/green] Updated step {number} of {escape(recipe.name)}:")
        self.console.print(f"  [dim]{escape(str(old))}[/dim] → {escape(str(new))}")

    def show_ingredient_edited(self, recipe: Recipe, number: int, old: Ingredient, new: Ingredient) -> None:
        self.console.print(f"[green]✓[/green] Updated ingredient {number} of {escape(recipe.name)}:")
        self.console.print(f"  [dim]{escape(str(old))}[/dim] → {escape(str(new))}")

    def show_edit_cancelled(self) -> None:
        self.console.print("[dim]Edit cancelled.[/dim]")

    def show_blank_input(self) -> None:
        self.console.print("[yellow]Input cannot be blank, please try again.[/yellow]")

    def show_error(self, heading: str, error: RecipeBookError) -> None:
        self.console.print(f"[red]{heading}: {escape(str(error))}[/red]")

    def show_help(self) -> None:
        self.console.print(Panel(HELP_TEXT, border_style="blue"))

    def show_exit(self) -> None:
        self.console.print("[dim]Bye! Hope to see you again soon.[/dim]")

    def show_unrecognized(self, keyword: str) -> None:
        self.console.print(f"[red]Sorry, '{escape(keyword)}' is not a recognized command.[/red]")
        self.console.print("[dim]Type 'help' for available commands[/dim]")
