"""Tests for the command-line interface."""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from adoption_catalog.catalog.errors import NetworkFailure
from adoption_catalog.catalog.loader import AnimalLoader, LoadResult
from adoption_catalog.catalog.models import Animal
from adoption_catalog.cli import app

from conftest import make_animals, raw_animal

runner = CliRunner()


@pytest.fixture
def loaded():
    """Patch the loader to return a small mixed dataset."""
    animals = (
        make_animals(25, "Biobío", start=1)
        + make_animals(3, "Metropolitana", start=100)
        + [Animal.model_validate(raw_animal(
            500,
            "Ñuble",
            nombre="Rex",
            desc_fisica="<b>Grande</b> [red]y negro[/red]",
            desc_personalidad="Tranquilo<br>Cariñoso",
        ))]
    )
    result = LoadResult(animals=tuple(animals), total=len(animals), last_page=1)
    with patch.object(AnimalLoader, "load", return_value=result) as mock_load:
        yield mock_load


class TestCli:
    """Tests for CLI commands."""

    def test_browse_first_page(self, loaded):
        result = runner.invoke(app, ["browse"])
        assert result.exit_code == 0
        assert "page 1/2" in result.output
        assert "29 animals" in result.output

    def test_browse_region_and_page(self, loaded):
        result = runner.invoke(app, ["browse", "--region", "Biobío", "--page", "9"])
        assert result.exit_code == 0
        assert "page 2/2" in result.output
        assert "25 animals" in result.output

    def test_browse_empty_region(self, loaded):
        result = runner.invoke(app, ["browse", "--region", "Aysén"])
        assert result.exit_code == 0
        assert "No animals found" in result.output
        assert "page 1/1" in result.output

    def test_browse_load_failure(self):
        with patch.object(AnimalLoader, "load", side_effect=NetworkFailure("down")):
            result = runner.invoke(app, ["browse"])
        assert result.exit_code == 1
        assert "Error fetching animals" in result.output

    def test_regions(self, loaded):
        result = runner.invoke(app, ["regions"])
        assert result.exit_code == 0
        assert result.output.index("Metropolitana") < result.output.index("Ñuble")
        assert result.output.index("Ñuble") < result.output.index("Biobío")

    def test_show_renders_plain_text(self, loaded):
        result = runner.invoke(app, ["show", "500"])
        assert result.exit_code == 0
        assert "Rex" in result.output
        assert "<b>" not in result.output
        assert "[red]y negro[/red]" in result.output
        assert "Tranquilo\nCariñoso" in result.output
        assert "https://example.test/animal/500" in result.output

    def test_show_unknown(self, loaded):
        result = runner.invoke(app, ["show", "12345"])
        assert result.exit_code == 1
        assert "Animal not found" in result.output

    @pytest.mark.parametrize("command", ["browse", "interactive"])
    @pytest.mark.parametrize("page_size", ["0", "-5"])
    def test_page_size_must_be_positive(self, loaded, command, page_size):
        result = runner.invoke(app, [command, "--page-size", page_size], input="q\n")
        assert result.exit_code == 2
        assert not isinstance(result.exception, ValueError)
        loaded.assert_not_called()

    def test_interactive_bad_page_number(self, loaded):
        result = runner.invoke(app, ["interactive"], input="g --5\ng ²\ng dos\ng 2\nq\n")
        assert result.exit_code == 0
        assert result.output.count("Usage: g N") == 3
        assert "page 2/2" in result.output
        assert "Bye." in result.output

    def test_interactive_unknown_region_warns(self, loaded):
        result = runner.invoke(app, ["interactive"], input="r biobío\nr Biobío\nq\n")
        assert result.exit_code == 0
        assert result.output.count("Unknown region") == 1
        assert "No animals found" in result.output
        assert "25 animals" in result.output

    def test_browse_unknown_region_warns(self, loaded):
        result = runner.invoke(app, ["browse", "--region", "Narnia"])
        assert result.exit_code == 0
        assert "Unknown region: Narnia" in result.output

    def test_interactive(self, loaded):
        result = runner.invoke(
            app, ["interactive", "--page-size", "10"], input="n\nr Metropolitana\ng 4\nq\n"
        )
        assert result.exit_code == 0
        assert "page 2/3" in result.output
        assert "page 1/1" in result.output
        assert "Bye." in result.output
