"""Tests for the Typer CLI."""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from typer.testing import CliRunner

from mixologist import __version__
from mixologist.catalog.local import LocalCatalog
from mixologist.cli.main import app
from mixologist.exceptions import FavoritesStoreError
from mixologist.services.favorites import create_sql_store
from mixologist.services.search_service import SearchService
from tests.factories import FakeCocktailDB, make_drink, make_profile

runner = CliRunner()


@pytest.fixture
def search_service() -> SearchService:
    local = LocalCatalog(
        profiles=[
            make_profile("Negroni", method="Stir with ice."),
            make_profile("Dry Martini"),
            make_profile("Espresso Martini"),
        ]
    )
    return SearchService(local, FakeCocktailDB(by_name={"mojito": [make_drink("Mojito")]}))


@pytest.fixture
def db_path(tmp_path: Path, monkeypatch) -> Path:
    path = tmp_path / "cli.db"
    monkeypatch.setenv("DATABASE_URL", str(path))
    monkeypatch.setenv("FAVORITES_BACKEND", "sql")
    return path


def _invoke(search_service: SearchService, *args: str):
    with patch("mixologist.cli.main.build_search_service", return_value=search_service):
        return runner.invoke(app, list(args))


class TestSearchCommand:
    """Tests for `mixologist search`."""

    def test_single_result_prints_card(self, search_service: SearchService) -> None:
        result = _invoke(search_service, "search", "negroni", "--no-image")

        assert result.exit_code == 0
        assert "Negroni" in result.output
        assert "Stir with ice." in result.output
        assert "Ingredients" in result.output

    def test_multiple_results_print_table(self, search_service: SearchService) -> None:
        result = _invoke(search_service, "search", "martini")

        assert result.exit_code == 0
        assert "Dry Martini" in result.output
        assert "Espresso Martini" in result.output
        assert "2 cocktails" in result.output

    def test_single_result_resolves_image(self, search_service: SearchService) -> None:
        search_service.image_resolver = AsyncMock()
        search_service.image_resolver.resolve = AsyncMock(return_value="https://img/negroni.jpg")

        result = _invoke(search_service, "search", "negroni")

        assert result.exit_code == 0
        assert "https://img/negroni.jpg" in result.output
        search_service.image_resolver.resolve.assert_awaited_once()

    def test_ingredient_flag(self, search_service: SearchService) -> None:
        result = _invoke(search_service, "search", "gin", "--ingredient")

        assert result.exit_code == 0
        assert "Negroni" in result.output

    def test_not_found(self, search_service: SearchService) -> None:
        result = _invoke(search_service, "search", "zombie")

        assert result.exit_code == 1
        assert "No cocktails found" in result.output

    def test_error(self, search_service: SearchService) -> None:
        search_service.search = AsyncMock(side_effect=RuntimeError("network down"))

        result = _invoke(search_service, "search", "negroni")

        assert result.exit_code == 2
        assert "A technical error occurred: network down" in result.output


class TestFavoritesCommands:
    """Tests for `mixologist favorites`."""

    def test_list_empty(self, db_path: Path) -> None:
        result = runner.invoke(app, ["favorites", "list"])

        assert result.exit_code == 0
        assert "No favorites saved yet" in result.output

    def test_list_and_show(self, db_path: Path) -> None:
        create_sql_store(db_path).put(make_profile("Gimlet", method="Shake hard."))

        listed = runner.invoke(app, ["favorites", "list"])
        assert listed.exit_code == 0
        assert "Gimlet" in listed.output

        shown = runner.invoke(app, ["favorites", "show", "gimlet"])
        assert shown.exit_code == 0
        assert "Shake hard." in shown.output

    def test_remove(self, db_path: Path) -> None:
        store = create_sql_store(db_path)
        store.put(make_profile("Gimlet"))

        result = runner.invoke(app, ["favorites", "remove", "Gimlet"])

        assert result.exit_code == 0
        assert not store.exists("Gimlet")

    def test_missing_favorite(self, db_path: Path) -> None:
        assert runner.invoke(app, ["favorites", "show", "nothing"]).exit_code == 1
        assert runner.invoke(app, ["favorites", "remove", "nothing"]).exit_code == 1

    @pytest.mark.parametrize(
        "args",
        [["favorites", "list"], ["favorites", "show", "gimlet"], ["favorites", "remove", "gimlet"]],
    )
    def test_store_error_reported(self, args: list[str]) -> None:
        store = MagicMock()
        store.get_all.side_effect = FavoritesStoreError("database is locked")
        store.get.side_effect = FavoritesStoreError("database is locked")
        store.delete.side_effect = FavoritesStoreError("database is locked")

        with patch("mixologist.cli.favorites.create_favorites_store", return_value=store):
            result = runner.invoke(app, args)

        assert result.exit_code == 1
        assert "database is locked" in result.output
        assert result.exception is None or isinstance(result.exception, SystemExit)

    def test_unavailable_store_reported(self) -> None:
        with patch(
            "mixologist.cli.favorites.create_favorites_store",
            side_effect=FavoritesStoreError("Favorites database unavailable"),
        ):
            result = runner.invoke(app, ["favorites", "list"])

        assert result.exit_code == 1
        assert "Favorites database unavailable" in result.output


class TestUtilityCommands:
    """Tests for version, init-db and check-config."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_init_db(self, db_path: Path) -> None:
        result = runner.invoke(app, ["init-db"])

        assert result.exit_code == 0
        assert db_path.exists()

    def test_init_db_sqlite_url(self, tmp_path: Path, monkeypatch) -> None:
        path = tmp_path / "url.db"
        monkeypatch.setenv("DATABASE_URL", f"sqlite:///{path}")

        result = runner.invoke(app, ["init-db"])

        assert result.exit_code == 0
        assert path.exists()
        assert f"sqlite:///{path}" in result.output

    def test_check_config(self, db_path: Path, monkeypatch) -> None:
        monkeypatch.setenv("ANTHROPIC_API_KEY", "your-anthropic-api-key-here")
        monkeypatch.setenv("OPENAI_API_KEY", "")

        result = runner.invoke(app, ["check-config"])

        assert result.exit_code == 0
        assert "Not configured" in result.output
        assert str(db_path) in result.output
