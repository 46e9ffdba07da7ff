"""Mealstream storefront: menu catalog, cart checks and checkout."""
