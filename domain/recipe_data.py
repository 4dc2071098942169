"""The fixed recipe catalog, loaded once at start up."""

from domain.models import Category, Difficulty, Recipe


RECIPES: tuple[Recipe, ...] = (
    Recipe(
        id="1",
        name="Classic Pancakes",
        description="Fluffy golden pancakes perfect for a weekend breakfast",
        ingredients=("flour", "eggs", "milk", "butter", "sugar", "baking powder"),
        steps=(
            "Mix flour, sugar, and baking powder in a large bowl",
            "Whisk eggs and milk together in a separate bowl",
            "Combine wet and dry ingredients until just mixed",
            "Melt butter in a pan over medium heat",
            "Pour batter and cook until bubbles form, then flip",
            "Serve warm with your favorite toppings",
        ),
        cook_time="20 min",
        difficulty=Difficulty.easy,
        category=Category.breakfast,
    ),
    Recipe(
        id="2",
        name="Chicken Stir Fry",
        description="Quick and healthy Asian-inspired stir fry",
        ingredients=(
            "chicken breast",
            "soy sauce",
            "garlic",
            "bell pepper",
            "broccoli",
            "vegetable oil",
            "ginger",
        ),
        steps=(
            "Slice chicken into thin strips",
            "Mince garlic and ginger",
            "Chop vegetables into bite-sized pieces",
            "Heat oil in a wok over high heat",
            "Cook chicken until golden, set aside",
            "Stir fry vegetables for 3-4 minutes",
            "Return chicken, add soy sauce, and toss to combine",
        ),
        cook_time="25 min",
        difficulty=Difficulty.medium,
        category=Category.dinner,
    ),
    Recipe(
        id="3",
        name="Caprese Salad",
        description="Fresh Italian salad with tomatoes and mozzarella",
        ingredients=(
            "tomatoes",
            "mozzarella",
            "basil",
            "olive oil",
            "balsamic vinegar",
            "salt",
        ),
        steps=(
            "Slice tomatoes and mozzarella into even rounds",
            "Arrange alternately on a serving plate",
            "Tuck fresh basil leaves between slices",
            "Drizzle with olive oil and balsamic vinegar",
            "Season with salt to taste",
            "Serve immediately at room temperature",
        ),
        cook_time="10 min",
        difficulty=Difficulty.easy,
        category=Category.lunch,
    ),
    Recipe(
        id="4",
        name="Chocolate Chip Cookies",
        description="Crispy edges, chewy centers - the perfect cookie",
        ingredients=(
            "flour",
            "butter",
            "sugar",
            "brown sugar",
            "eggs",
            "vanilla extract",
            "chocolate chips",
            "baking soda",
        ),
        steps=(
            "Cream butter with both sugars until fluffy",
            "Beat in eggs and vanilla extract",
            "Mix flour and baking soda, add to wet ingredients",
            "Fold in chocolate chips",
            "Scoop dough onto baking sheets",
            "Bake at 375°F for 10-12 minutes",
            "Cool on pan for 5 minutes before serving",
        ),
        cook_time="30 min",
        difficulty=Difficulty.easy,
        category=Category.dessert,
    ),
    Recipe(
        id="5",
        name="Grilled Cheese Sandwich",
        description="The ultimate comfort food with melty cheese",
        ingredients=("bread", "butter", "cheddar cheese"),
        steps=(
            "Butter one side of each bread slice",
            "Place cheese between bread, butter side out",
            "Heat pan over medium-low heat",
            "Cook sandwich 3-4 minutes per side",
            "Press gently with spatula for even browning",
            "Slice in half and serve hot",
        ),
        cook_time="10 min",
        difficulty=Difficulty.easy,
        category=Category.lunch,
    ),
    Recipe(
        id="6",
        name="Spaghetti Carbonara",
        description="Creamy Italian pasta with bacon and parmesan",
        ingredients=(
            "spaghetti",
            "bacon",
            "eggs",
            "parmesan cheese",
            "garlic",
            "black pepper",
        ),
        steps=(
            "Cook spaghetti in salted boiling water",
            "Fry bacon until crispy, add minced garlic",
            "Whisk eggs with grated parmesan and pepper",
            "Drain pasta, reserving some cooking water",
            "Toss hot pasta with bacon off heat",
            "Quickly mix in egg mixture, stirring continuously",
            "Add pasta water if needed for silky sauce",
        ),
        cook_time="25 min",
        difficulty=Difficulty.medium,
        category=Category.dinner,
    ),
    Recipe(
        id="7",
        name="Avocado Toast",
        description="Trendy breakfast with creamy avocado on crispy bread",
        ingredients=(
            "bread",
            "avocado",
            "lemon juice",
            "salt",
            "red pepper flakes",
        ),
        steps=(
            "Toast bread until golden and crispy",
            "Cut avocado in half and remove pit",
            "Scoop flesh into a bowl and mash",
            "Add lemon juice and salt, mix well",
            "Spread avocado on toast",
            "Sprinkle with red pepper flakes",
        ),
        cook_time="5 min",
        difficulty=Difficulty.easy,
        category=Category.breakfast,
    ),
    Recipe(
        id="8",
        name="Beef Tacos",
        description="Mexican-style tacos with seasoned ground beef",
        ingredients=(
            "ground beef",
            "taco shells",
            "onion",
            "garlic",
            "cumin",
            "chili powder",
            "lettuce",
            "tomatoes",
            "cheese",
        ),
        steps=(
            "Dice onion and mince garlic",
            "Brown ground beef in a skillet",
            "Add onion, garlic, cumin, and chili powder",
            "Cook until onion is soft and beef is seasoned",
            "Warm taco shells according to package",
            "Fill shells with beef mixture",
            "Top with lettuce, tomatoes, and cheese",
        ),
        cook_time="20 min",
        difficulty=Difficulty.easy,
        category=Category.dinner,
    ),
)
