"""Rich rendering of cocktail profiles for the terminal."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from mixologist.core.schema import CocktailProfile


def profile_table(profiles: list[CocktailProfile], title: str) -> Table:
    """Summary table, one row per cocktail."""
    table = Table(title=title)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Classification")
    table.add_column("Glass")
    table.add_column("Ingredients")
    table.add_column("ABV", justify="right")

    for index, profile in enumerate(profiles, start=1):
        ingredients = ", ".join(ingredient.name for ingredient in profile.ingredients)
        table.add_row(
            str(index),
            profile.name,
            profile.iba_classification,
            profile.glassware,
            ingredients,
            profile.abv,
        )
    return table


def print_profile(console: Console, profile: CocktailProfile) -> None:
    """Full recipe card."""
    labels = [profile.iba_classification, *profile.categories, profile.difficulty.value]
    if profile.abv:
        labels.append(f"{profile.abv} ABV")
    labels.extend(f"#{tag}" for tag in profile.tags)

    header = f"[bold {profile.color}]{profile.name}[/bold {profile.color}]"
    body = [" · ".join(label for label in labels if label)]
    if profile.curiosity:
        body.append(f'\n[italic]"{profile.curiosity}"[/italic]')
    console.print(Panel("\n".join(body), title=header, border_style=profile.color))

    specs = Table(show_header=False, box=None, padding=(0, 2))
    specs.add_column(style="dim")
    specs.add_column()
    specs.add_row("Preparation", profile.preparation_type)
    specs.add_row("Glassware", profile.glassware)
    specs.add_row("Straining", profile.straining_technique)
    specs.add_row("Garnish", profile.garnish)
    console.print(specs)

    ingredients = Table(title="Ingredients", title_justify="left")
    ingredients.add_column("Amount", justify="right")
    ingredients.add_column("Ingredient", style="bold")
    for ingredient in profile.ingredients:
        ingredients.add_row(ingredient.amount, ingredient.name)
    console.print(ingredients)

    for label, text in (
        ("Method", profile.method),
        ("History", profile.history),
        ("Pairing", profile.pairing),
    ):
        if text:
            console.print(f"\n[bold]{label}[/bold]\n{text}")

    if profile.image_url:
        if profile.image_url.startswith("data:"):
            console.print("\n[dim]Image: generated (inline data)[/dim]")
        else:
            console.print(f"\n[dim]Image: {profile.image_url}[/dim]")
