from .user_profile import UserProfile
from .food_entry import FoodEntry
