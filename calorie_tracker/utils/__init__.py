from .utils import (
    calculate_bmr,
    get_activity_multiplier,
    calculate_tdee,
    calculate_daily_calorie_goal,
    summarize_daily_intake,
    group_entries_by_date,
    get_day_status,
    calculate_progress,
    get_nutrition_by_name,
    load_image
)
