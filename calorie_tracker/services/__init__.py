from .food_recognition_service import FoodRecognitionService
from .user_profile_service import UserProfileService
from .food_entry_service import FoodEntryService
from .daily_intake_service import DailyIntakeService
