"""Tests for the bundled local cocktail collection."""

from pathlib import Path

import pytest

from mixologist.catalog.local import DEFAULT_DATASET_PATH, LocalCatalog, load_dataset
from mixologist.core.enums import Difficulty, SearchMode
from mixologist.exceptions import DatasetError
from tests.factories import make_profile


@pytest.fixture
def catalog() -> LocalCatalog:
    return LocalCatalog()


class TestLoadDataset:
    """Tests for load_dataset()."""

    def test_bundled_dataset_loads(self) -> None:
        profiles = load_dataset(DEFAULT_DATASET_PATH)

        assert len(profiles) >= 10
        assert all(profile.is_complete for profile in profiles)

    def test_bundled_names_unique(self) -> None:
        keys = [profile.dedup_key for profile in load_dataset(DEFAULT_DATASET_PATH)]
        assert len(keys) == len(set(keys))

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(DatasetError, match="not found"):
            load_dataset(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.yaml"
        path.write_text("cocktails: [name: {", encoding="utf-8")
        with pytest.raises(DatasetError, match="Invalid YAML"):
            load_dataset(path)

    def test_entry_without_ingredients(self, tmp_path: Path) -> None:
        path = tmp_path / "incomplete.yaml"
        path.write_text("cocktails:\n  - name: Ghost\n", encoding="utf-8")
        with pytest.raises(DatasetError, match="at least one ingredient"):
            load_dataset(path)

    def test_custom_dataset(self, tmp_path: Path) -> None:
        path = tmp_path / "mini.yaml"
        path.write_text(
            "cocktails:\n"
            "  - name: Gimlet\n"
            "    difficulty: fácil\n"
            "    ingredients:\n"
            "      - {name: Gin, amount: 60 ml}\n"
            "      - {name: Lime cordial, amount: 15 ml}\n",
            encoding="utf-8",
        )
        profiles = load_dataset(path)

        assert [p.name for p in profiles] == ["Gimlet"]
        assert profiles[0].difficulty == Difficulty.EASY


class TestLocalCatalog:
    """Tests for LocalCatalog search."""

    def test_search_by_name(self, catalog: LocalCatalog) -> None:
        results = catalog.search("negroni")

        assert [p.name for p in results] == ["Negroni"]
        negroni = results[0]
        assert negroni.difficulty == Difficulty.EASY
        assert negroni.color == "#B22222"
        assert negroni.abv == "24%"

    def test_search_by_name_substring(self, catalog: LocalCatalog) -> None:
        names = [p.name for p in catalog.search("MARTINI")]
        assert names == ["Dry Martini", "Espresso Martini"]

    def test_search_by_ingredient(self, catalog: LocalCatalog) -> None:
        names = [p.name for p in catalog.search("campari", SearchMode.BY_INGREDIENT)]
        assert names == ["Negroni", "Boulevardier"]

    def test_ingredient_substring_matches(self, catalog: LocalCatalog) -> None:
        names = [p.name for p in catalog.search("gin", SearchMode.BY_INGREDIENT)]
        assert "Negroni" in names
        assert "Moscow Mule" in names  # Ginger beer

    def test_name_mode_ignores_ingredients(self, catalog: LocalCatalog) -> None:
        assert catalog.search("campari") == []

    def test_blank_query(self, catalog: LocalCatalog) -> None:
        assert catalog.search("   ") == []

    def test_no_match(self, catalog: LocalCatalog) -> None:
        assert catalog.search("zombie punch") == []

    def test_get(self, catalog: LocalCatalog) -> None:
        assert catalog.get("old fashioned").name == "Old Fashioned"
        assert catalog.get("fashioned") is None

    def test_explicit_profiles(self) -> None:
        catalog = LocalCatalog(profiles=[make_profile("Gimlet"), make_profile("Gin Fizz")])

        assert [p.name for p in catalog.search("gi")] == ["Gimlet", "Gin Fizz"]
        assert len(catalog.all()) == 2

    def test_lazy_load_failure_raises(self, tmp_path: Path) -> None:
        catalog = LocalCatalog(dataset_path=tmp_path / "missing.yaml")
        with pytest.raises(DatasetError):
            catalog.search("negroni")

    def test_load_reads_dataset_once(self) -> None:
        catalog = LocalCatalog()
        assert not catalog.is_loaded

        profiles = catalog.load()

        assert catalog.is_loaded
        assert catalog.load() is profiles
        assert catalog.get("Negroni") is not None

    def test_explicit_profiles_already_loaded(self) -> None:
        assert LocalCatalog(profiles=[]).is_loaded

    def test_load_failure_raises(self, tmp_path: Path) -> None:
        catalog = LocalCatalog(dataset_path=tmp_path / "missing.yaml")

        with pytest.raises(DatasetError, match="not found"):
            catalog.load()
        assert not catalog.is_loaded
