import math
from io import BytesIO
from collections import OrderedDict
from datetime import date
from PIL import Image, UnidentifiedImageError
from ..data import FOOD_NUTRITION_DB, DEFAULT_NUTRITION
from calorie_tracker.enums.app_enum import TrainingFrequencyEnum, GenderEnum, DayStatusEnum

# -------------------- CALORIE / BMR / TDEE -------------------- #
ACTIVITY_FACTOR = {
    TrainingFrequencyEnum.sedentary: 1.2,
    TrainingFrequencyEnum.light: 1.375,
    TrainingFrequencyEnum.moderate: 1.55,
    TrainingFrequencyEnum.active: 1.725,
    TrainingFrequencyEnum.very_active: 1.9,
}

# 1 kg of body weight ~ 7700 kcal
KCAL_PER_KG = 7700
MIN_TARGET_DAYS = 1

def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))

def calculate_bmr(weight_kg: float, height_cm: float, age: int, gender: str) -> float:
    """
    Mifflin-St Jeor equation; any gender other than male uses the female constant
    """
    if gender == GenderEnum.male:
        return 10 * weight_kg + 6.25 * height_cm - 5 * age + 5
    return 10 * weight_kg + 6.25 * height_cm - 5 * age - 161

def get_activity_multiplier(activity_level) -> float:
    return ACTIVITY_FACTOR.get(activity_level, 1.2)

def calculate_tdee(bmr: float, activity_level) -> float:
    """
    TDEE = BMR * activity factor
    """
    return bmr * get_activity_multiplier(activity_level)

def calculate_daily_calorie_goal(
        current_weight: float,
        ideal_weight: float,
        height_cm: float,
        age: int,
        gender: str,
        activity_level,
        target_days: int
) -> int:
    """
    Daily calorie goal = TDEE + the daily surplus/deficit needed to move from
    current_weight to ideal_weight within target_days.

    The result is not clamped: an aggressive timeline can produce a goal far
    below BMR, or even a negative one.
    Raises ValueError when target_days is below MIN_TARGET_DAYS.
    """
    if target_days is None or target_days < MIN_TARGET_DAYS:
        raise ValueError(f"target_days must be at least {MIN_TARGET_DAYS}")

    weight_diff = ideal_weight - current_weight
    weekly_weight_change = weight_diff / (target_days / 7)

    weekly_calorie_adjustment = weekly_weight_change * KCAL_PER_KG
    daily_calorie_adjustment = weekly_calorie_adjustment / 7

    bmr = calculate_bmr(current_weight, height_cm, age, gender)
    tdee = calculate_tdee(bmr, activity_level)

    return _round_half_up(tdee + daily_calorie_adjustment)

# -------------------- DAILY INTAKE -------------------- #

def summarize_daily_intake(log_date: date, entries: list) -> dict:
    return {
        "date": log_date.isoformat(),
        "total_calories": sum(e.calories or 0 for e in entries),
        "total_protein": sum(e.protein or 0 for e in entries),
        "total_carbs": sum(e.carbs or 0 for e in entries),
        "total_fat": sum(e.fat or 0 for e in entries),
        "entries": [e.to_dict() for e in entries]
    }

def group_entries_by_date(entries: list) -> "OrderedDict[str, dict]":
    buckets = OrderedDict()
    for entry in sorted(entries, key=lambda e: e.date):
        buckets.setdefault(entry.date, []).append(entry)
    return OrderedDict(
        (log_date.isoformat(), summarize_daily_intake(log_date, day_entries))
        for log_date, day_entries in buckets.items()
    )

def get_day_status(intake: dict | None, daily_goal: float) -> DayStatusEnum:
    if not intake:
        return DayStatusEnum.empty

    # A goal at or below zero is exceeded by any logged intake
    if daily_goal <= 0:
        return DayStatusEnum.over

    percentage = intake["total_calories"] / daily_goal * 100
    if percentage >= 100:
        return DayStatusEnum.over
    if percentage >= 80:
        return DayStatusEnum.good
    return DayStatusEnum.low

def calculate_progress(consumed: float, daily_goal: float) -> dict:
    if daily_goal > 0:
        progress = min(consumed / daily_goal * 100, 100)
    else:
        progress = 100 if consumed > 0 else 0
    return {
        "daily_goal": daily_goal,
        "consumed": consumed,
        "remaining": daily_goal - consumed,
        "progress_percentage": round(progress, 1)
    }

# -------------------- NUTRITION -------------------- #

def get_nutrition_by_name(food_name: str) -> dict:
    """
    First table row whose name occurs anywhere in food_name (case-insensitive),
    or the average values under the given name.
    """
    normalized_name = (food_name or "").strip().lower()
    for food_item in FOOD_NUTRITION_DB:
        if food_item['name'].lower() in normalized_name:
            return {
                'food_name': food_item['name'],
                'calories': food_item['nutrition']['Calories'],
                'protein': food_item['nutrition']['Protein'],
                'carbs': food_item['nutrition']['Carbs'],
                'fat': food_item['nutrition']['Fat']
            }
    return {
        'food_name': food_name,
        'calories': DEFAULT_NUTRITION['Calories'],
        'protein': DEFAULT_NUTRITION['Protein'],
        'carbs': DEFAULT_NUTRITION['Carbs'],
        'fat': DEFAULT_NUTRITION['Fat']
    }

# -------------------- IMAGE -------------------- #

def load_image(image_bytes: bytes) -> Image.Image:
    """
    Decode uploaded bytes into an RGB PIL image. Raises ValueError for
    anything PIL cannot read.
    """
    try:
        return Image.open(BytesIO(image_bytes)).convert('RGB')
    except (UnidentifiedImageError, OSError) as error:
        raise ValueError("Invalid image file.") from error

