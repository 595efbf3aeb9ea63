from recipebook.console import InteractiveConsole
from recipebook.dispatcher import CommandDispatcher


def test_runs_until_exit(abc_recipes, storage, ui, scripted_input, output):
    scripted_input.feed("", "delete 1", "   ", "exit", "clear")
    dispatcher = CommandDispatcher(abc_recipes, storage, ui)

    InteractiveConsole(dispatcher).run()

    assert "You have 3 recipe(s) saved." in output()
    assert [recipe.name for recipe in abc_recipes] == ["B", "C"]
    # "clear" after exit is never read
    assert scripted_input.lines == ["clear"]
    assert storage.saves == [["B", "C"]]


def test_end_of_input_ends_session(dispatcher, scripted_input, output):
    scripted_input.feed("list")

    InteractiveConsole(dispatcher).run()

    assert "Your recipe list is empty." in output()
    assert "Bye!" in output()


def test_errors_do_not_end_session(abc_recipes, storage, ui, scripted_input, output):
    scripted_input.feed("view 10", "delete x", "nonsense", "view 1", "exit")
    dispatcher = CommandDispatcher(abc_recipes, storage, ui)

    InteractiveConsole(dispatcher).run()

    assert "Error viewing recipe" in output()
    assert "Error deleting recipe" in output()
    assert "'nonsense' is not a recognized command." in output()
    assert "Tag:" in output()
    assert scripted_input.lines == []
