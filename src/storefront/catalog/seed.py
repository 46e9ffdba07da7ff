"""The fixed menu restored by a catalog reset."""

# (meal_id, name, price, stock). Meal 3 is seeded sold out.
SEED_MENU = (
    (1, "Spaghetti Bolognese", 11.9, 5),
    (2, "Mediterranean Salad", 9.5, 3),
    (3, "Chicken Curry", 12.5, 0),
    (4, "Classic Burger", 10.9, 8),
)
