"""SQLite persistence for recipes, meal plans and the shopping/pantry documents."""
