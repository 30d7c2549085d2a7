import calendar
from datetime import date, timedelta

from flask import current_app

from calorie_tracker.models import UserProfile
from calorie_tracker.utils import (
    summarize_daily_intake,
    group_entries_by_date,
    get_day_status,
    calculate_progress
)
from .food_entry_service import FoodEntryService, parse_log_date

MAX_RANGE_DAYS = 366


def get_daily_goal(user_id: str):
    """
    (goal, has_profile). Users without a profile are measured against the
    default goal.
    """
    profile = UserProfile.query.filter_by(user_id=user_id).first()
    if profile:
        return profile.daily_calorie_goal, True
    return current_app.config.get("DEFAULT_DAILY_CALORIE_GOAL", 2000), False


class DailyIntakeService:

    @staticmethod
    def get_daily_intake(user_id: str, log_date: str | None = None):
        try:
            day = parse_log_date(log_date)
        except ValueError:
            return None, "Invalid date format, use YYYY-MM-DD"

        entries = FoodEntryService.get_entries_between(user_id, day, day)
        intake = summarize_daily_intake(day, entries)
        daily_goal, has_profile = get_daily_goal(user_id)

        return {
            "intake": intake,
            "has_profile": has_profile,
            "status": get_day_status(intake if entries else None, daily_goal).value,
            **calculate_progress(intake["total_calories"], daily_goal)
        }, None

    @staticmethod
    def get_daily_intakes(user_id: str, start_date: str | None, end_date: str | None):
        try:
            start = parse_log_date(start_date)
            end = date.fromisoformat(end_date) if end_date else start
        except ValueError:
            return None, "Invalid date format, use YYYY-MM-DD"

        if end < start:
            return None, "end_date must not be before start_date"
        if (end - start).days >= MAX_RANGE_DAYS:
            return None, f"Date range is limited to {MAX_RANGE_DAYS} days"

        entries = FoodEntryService.get_entries_between(user_id, start, end)
        return list(group_entries_by_date(entries).values()), None

    @staticmethod
    def get_month_calendar(user_id: str, month: str | None = None):
        today = date.today()
        try:
            if month:
                year_str, month_str = month.split("-")
                year, month_num = int(year_str), int(month_str)
                first_day = date(year, month_num, 1)
            else:
                first_day = today.replace(day=1)
        except ValueError:
            return None, "Invalid month format, use YYYY-MM"

        days_in_month = calendar.monthrange(first_day.year, first_day.month)[1]
        last_day = first_day + timedelta(days=days_in_month - 1)

        entries = FoodEntryService.get_entries_between(user_id, first_day, last_day)
        intakes = group_entries_by_date(entries)
        daily_goal, has_profile = get_daily_goal(user_id)

        days = []
        totals = {"total_calories": 0, "total_protein": 0, "total_carbs": 0, "total_fat": 0}
        for offset in range(days_in_month):
            day = first_day + timedelta(days=offset)
            intake = intakes.get(day.isoformat())
            if intake:
                for key in totals:
                    totals[key] += intake[key]
            days.append({
                "date": day.isoformat(),
                "weekday": day.strftime("%a"),
                "is_today": day == today,
                "status": get_day_status(intake, daily_goal).value,
                "total_calories": intake["total_calories"] if intake else 0,
                "total_protein": intake["total_protein"] if intake else 0,
                "total_carbs": intake["total_carbs"] if intake else 0,
                "total_fat": intake["total_fat"] if intake else 0,
                "entries_count": len(intake["entries"]) if intake else 0
            })

        return {
            "month": first_day.strftime("%Y-%m"),
            "daily_goal": daily_goal,
            "has_profile": has_profile,
            "days_logged": len(intakes),
            "summary": totals,
            "days": days
        }, None
