import pytest

from calorie_tracker.enums.app_enum import TrainingFrequencyEnum
from calorie_tracker.utils import (
    calculate_bmr,
    calculate_tdee,
    calculate_daily_calorie_goal,
    get_activity_multiplier
)


def test_bmr_mifflin_st_jeor_male_and_female():
    assert calculate_bmr(80, 175, 30, "male") == pytest.approx(1748.75)
    assert calculate_bmr(80, 175, 30, "female") == pytest.approx(1582.75)


def test_activity_multiplier_table():
    assert get_activity_multiplier("sedentary") == 1.2
    assert get_activity_multiplier("light") == 1.375
    assert get_activity_multiplier(TrainingFrequencyEnum.moderate) == 1.55
    assert get_activity_multiplier("active") == 1.725
    assert get_activity_multiplier("very_active") == 1.9


def test_unknown_activity_level_uses_sedentary_multiplier():
    assert get_activity_multiplier("couch_potato") == get_activity_multiplier("sedentary")
    assert calculate_tdee(1000, "couch_potato") == pytest.approx(1200)
    assert calculate_tdee(1000, None) == pytest.approx(1200)


def test_daily_goal_weight_loss_example():
    # BMR 1748.75, TDEE 2710.5625, daily adjustment -855.56
    goal = calculate_daily_calorie_goal(80, 70, 175, 30, "male", "moderate", 90)
    assert goal == 1855
    assert isinstance(goal, int)


def test_daily_goal_is_deterministic():
    args = (65.5, 60, 168, 41, "female", "light", 120)
    assert calculate_daily_calorie_goal(*args) == calculate_daily_calorie_goal(*args)


def test_daily_goal_matches_formula():
    current, ideal, height, age, days = 60.0, 66.0, 180.0, 25, 70
    bmr = 10 * current + 6.25 * height - 5 * age + 5
    tdee = bmr * 1.725
    daily_adjustment = (ideal - current) / (days / 7) * 7700 / 7
    expected = int(tdee + daily_adjustment + 0.5)

    assert calculate_daily_calorie_goal(current, ideal, height, age, "male", "active", days) == expected


def test_maintenance_goal_equals_rounded_tdee():
    goal = calculate_daily_calorie_goal(70, 70, 170, 40, "female", "sedentary", 30)
    assert goal == round((10 * 70 + 6.25 * 170 - 5 * 40 - 161) * 1.2)


def test_goal_is_not_clamped_for_aggressive_timeline():
    goal = calculate_daily_calorie_goal(120, 60, 170, 35, "male", "sedentary", 7)
    assert goal < 0


@pytest.mark.parametrize("days", [0, -5])
def test_goal_rejects_timeline_below_minimum(days):
    with pytest.raises(ValueError):
        calculate_daily_calorie_goal(80, 70, 175, 30, "male", "moderate", days)
