"""
Common food nutrition table
Nutritional information per typical serving, used when an image label is matched
"""

DEFAULT_FOOD_NAME = "Detected Food"

# Average values returned when nothing in the table matches
DEFAULT_NUTRITION = {
    "Calories": 250,
    "Protein": 15,
    "Carbs": 30,
    "Fat": 8
}

# Order matters: labels are matched against names top to bottom
FOOD_NUTRITION_DB = [
    {
        "name": "apple",
        "description": "Medium apple",
        "serving_type": "1 medium",
        "nutrition": {
            "Calories": 95,
            "Protein": 0.5,
            "Carbs": 25,
            "Fat": 0.3
        }
    },
    {
        "name": "banana",
        "description": "Medium banana",
        "serving_type": "1 medium",
        "nutrition": {
            "Calories": 105,
            "Protein": 1.3,
            "Carbs": 27,
            "Fat": 0.4
        }
    },
    {
        "name": "chicken breast",
        "description": "Roasted chicken breast, skinless",
        "serving_type": "1 breast",
        "nutrition": {
            "Calories": 231,
            "Protein": 43,
            "Carbs": 0,
            "Fat": 5
        }
    },
    {
        "name": "rice",
        "description": "Cooked white rice",
        "serving_type": "100g",
        "nutrition": {
            "Calories": 130,
            "Protein": 2.7,
            "Carbs": 28,
            "Fat": 0.3
        }
    },
    {
        "name": "salmon",
        "description": "Baked salmon fillet",
        "serving_type": "100g",
        "nutrition": {
            "Calories": 206,
            "Protein": 22,
            "Carbs": 0,
            "Fat": 12
        }
    },
    {
        "name": "broccoli",
        "description": "Boiled broccoli",
        "serving_type": "1 cup",
        "nutrition": {
            "Calories": 55,
            "Protein": 3.7,
            "Carbs": 11,
            "Fat": 0.6
        }
    },
    {
        "name": "egg",
        "description": "Large egg",
        "serving_type": "1 large",
        "nutrition": {
            "Calories": 70,
            "Protein": 6,
            "Carbs": 0.6,
            "Fat": 5
        }
    },
    {
        "name": "bread",
        "description": "Slice of wheat bread",
        "serving_type": "1 slice",
        "nutrition": {
            "Calories": 79,
            "Protein": 3,
            "Carbs": 15,
            "Fat": 1
        }
    },
    {
        "name": "pasta",
        "description": "Cooked pasta",
        "serving_type": "100g",
        "nutrition": {
            "Calories": 131,
            "Protein": 5,
            "Carbs": 25,
            "Fat": 1.1
        }
    },
    {
        "name": "pizza",
        "description": "Cheese pizza",
        "serving_type": "1 slice",
        "nutrition": {
            "Calories": 266,
            "Protein": 11,
            "Carbs": 33,
            "Fat": 10
        }
    }
]
