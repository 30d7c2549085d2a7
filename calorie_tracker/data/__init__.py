from .nutrition_info import FOOD_NUTRITION_DB, DEFAULT_FOOD_NAME, DEFAULT_NUTRITION
