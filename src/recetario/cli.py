"""Command-line interface for Recetario."""

from __future__ import annotations

import json
from typing import Optional

import typer

from recetario.config import get_settings
from recetario.db.meal_plans import get_current_meal_plan, get_meal_plan_by_id
from recetario.db.stores import SqlPantryStore, SqlRecipeLookup, SqlShoppingListStore
from recetario.logging_utils import configure_logging
from recetario.pantry import PantryService
from recetario.shopping import MealPlanShoppingGenerator, ShoppingListService

app = typer.Typer(help="Recetario family recipe manager commands.")


def _shopping_service() -> ShoppingListService:
    return ShoppingListService(SqlShoppingListStore(), SqlPantryStore())



def _exclude_pantry(include_pantry: Optional[bool]) -> bool:
    if include_pantry is None:
        return get_settings().exclude_pantry_default
    return not include_pantry

@app.callback()
def _setup() -> None:
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format, [settings.api_token or ""])


@app.command("shopping-list")
def shopping_list(
    as_json: bool = typer.Option(False, "--json", help="Print the raw document as JSON."),
) -> None:
    """Show the shopping list."""

    current = _shopping_service().get_shopping_list()
    if as_json:
        typer.echo(json.dumps(current.model_dump(mode="json"), indent=2, ensure_ascii=False))
        return
    if not current.items:
        typer.echo("Shopping list is empty.")
        return
    for item in current.items:
        mark = "x" if item.checked else " "
        origin = f"  ({', '.join(item.from_recipes)})" if item.from_recipes else ""
        typer.echo(f"[{mark}] {item.text}{origin}  #{item.id}")


@app.command("add-ingredients")
def add_ingredients(
    ingredients: str = typer.Argument(..., help="Ingredients, one per line or comma separated."),
    recipe: str = typer.Option(..., "--recipe", "-r", help="Recipe name recorded as provenance."),
    include_pantry: Optional[bool] = typer.Option(
        None,
        "--include-pantry/--exclude-pantry",
        help="Also add ingredients already stocked in the pantry (default: RECETARIO_EXCLUDE_PANTRY).",
    ),
) -> None:
    """Merge ingredients into the shopping list."""

    counts = _shopping_service().add_ingredients_to_shopping_list(
        ingredients,
        recipe,
        exclude_pantry=_exclude_pantry(include_pantry),
    )
    typer.echo(f"Added {counts.added}, skipped {counts.skipped} (in pantry).")


@app.command("add-item")
def add_item(text: str = typer.Argument(..., help="Free-text shopping item.")) -> None:
    """Add a manual shopping item."""

    item = _shopping_service().add_manual_item(text)
    if item is None:
        typer.secho("Nothing added: item text is blank.", fg=typer.colors.YELLOW)
        raise typer.Exit(code=1)
    typer.echo(f"Added '{item.text}' #{item.id}")


@app.command("clear")
def clear(
    checked_only: bool = typer.Option(False, "--checked", help="Only remove checked items."),
) -> None:
    """Clear the shopping list."""

    service = _shopping_service()
    if checked_only:
        service.clear_checked_items()
        typer.echo("Removed checked items.")
    else:
        service.clear_all_items()
        typer.echo("Shopping list cleared.")


@app.command("pantry")
def pantry() -> None:
    """List pantry items."""

    items = PantryService(SqlPantryStore()).get_pantry().items
    if not items:
        typer.echo("Pantry is empty.")
        return
    for item in items:
        quantity = f" ({item.quantity})" if item.quantity else ""
        typer.echo(f"{item.name}{quantity} [{item.category}] #{item.id}")


@app.command("pantry-add")
def pantry_add(
    name: str = typer.Argument(..., help="Ingredient name."),
    staple: bool = typer.Option(False, "--staple", help="Mark as always available."),
    quantity: Optional[str] = typer.Option(None, "--quantity", "-q", help="Free-text quantity."),
) -> None:
    """Add an item to the pantry."""

    item = PantryService(SqlPantryStore()).add_pantry_item(
        name,
        "staple" if staple else "current",
        quantity,
    )
    if item is None:
        typer.echo(f"'{name.strip()}' is already in the pantry.")
        return
    typer.echo(f"Added '{item.name}' #{item.id}")


@app.command("plan-shopping")
def plan_shopping(
    plan_id: Optional[str] = typer.Argument(None, help="Meal plan id (defaults to the latest plan)."),
    include_pantry: Optional[bool] = typer.Option(None, "--include-pantry/--exclude-pantry"),
) -> None:
    """Add every recipe of a meal plan to the shopping list."""

    plan = get_meal_plan_by_id(plan_id) if plan_id else get_current_meal_plan()
    if plan is None:
        typer.secho("Meal plan not found.", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    generator = MealPlanShoppingGenerator(SqlRecipeLookup(), _shopping_service())
    summary = generator.generate_shopping_list_from_plan(plan, exclude_pantry=_exclude_pantry(include_pantry))
    typer.echo(
        f"Merged {len(summary.recipes_merged)} recipe(s): "
        f"added {summary.added}, skipped {summary.skipped}."
    )
    if summary.recipes_missing:
        typer.echo(f"Missing recipes: {', '.join(summary.recipes_missing)}")


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point for the ``recetario`` script."""
    app(prog_name="recetario", args=argv)


if __name__ == "__main__":
    main()
