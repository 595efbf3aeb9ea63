import pytest
import yaml
from typer.testing import CliRunner

from recipebook import __version__
from recipebook.cli import app
from recipebook.logger import configure_logging

runner = CliRunner()


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    # The CLI points the stderr sink at the runner's stream
    configure_logging()


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_session_adds_and_persists_recipe(tmp_path):
    save_file = tmp_path / "recipes.yml"
    session = "\n".join([
        "add n/Pancakes i/flour:1 cup, milk t/breakfast s/2",
        "Whisk everything",
        "Fry in a pan",
        "list",
        "exit",
    ]) + "\n"

    result = runner.invoke(app, ["--file", str(save_file)], input=session)

    assert result.exit_code == 0, result.output
    assert "Added recipe #1: Pancakes [breakfast]" in result.output
    assert "Bye!" in result.output
    data = yaml.safe_load(save_file.read_text(encoding="utf-8"))
    assert [recipe["name"] for recipe in data["recipes"]] == ["Pancakes"]
    assert data["recipes"][0]["steps"] == [
        {"description": "Whisk everything"},
        {"description": "Fry in a pan"},
    ]


def test_session_picks_up_saved_recipes(tmp_path):
    save_file = tmp_path / "recipes.yml"
    runner.invoke(app, ["--file", str(save_file)], input="add n/Toast i/bread t/breakfast s/0\nexit\n")

    result = runner.invoke(app, ["--file", str(save_file)], input="view 1\n")

    assert result.exit_code == 0, result.output
    assert "You have 1 recipe(s) saved." in result.output
    assert "bread" in result.output


def test_corrupt_save_file_starts_empty(tmp_path):
    save_file = tmp_path / "recipes.yml"
    save_file.write_text("recipes: [oops", encoding="utf-8")

    result = runner.invoke(app, ["--file", str(save_file)], input="exit\n")

    assert result.exit_code == 0, result.output
    assert "Error loading saved recipes" in result.output
    assert "You have 0 recipe(s) saved." in result.output


def test_profile_option_uses_profile_save_file(tmp_path, monkeypatch):
    monkeypatch.setenv("RECIPEBOOK_HOME", str(tmp_path))

    result = runner.invoke(app, ["--profile", "work"], input="clear\nexit\n")

    assert result.exit_code == 0, result.output
    assert (tmp_path / "work" / "recipes.yml").exists()
    assert (tmp_path / "work" / "logs").is_dir()
