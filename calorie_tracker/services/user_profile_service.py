import logging
import math

from flask import jsonify
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from calorie_tracker.extensions import db
from calorie_tracker.models import UserProfile
from calorie_tracker.enums.app_enum import TrainingFrequencyEnum, GenderEnum
from calorie_tracker.utils import calculate_daily_calorie_goal
from calorie_tracker.utils.utils import MIN_TARGET_DAYS

logger = logging.getLogger(__name__)


def _parse_goal_payload(payload: dict):
    """
    Validate goal-setup input. Returns (values, error message).
    """
    if not isinstance(payload, dict):
        return None, "Invalid JSON body"

    values = {}
    for field in ("current_weight", "height", "ideal_weight"):
        raw = payload.get(field)
        try:
            values[field] = float(raw)
        except (TypeError, ValueError):
            return None, f"{field} must be a number"
        if not math.isfinite(values[field]):
            return None, f"{field} must be a finite number"
        if values[field] <= 0:
            return None, f"{field} must be greater than 0"

    for field in ("age", "target_timeline_days"):
        raw = payload.get(field)
        try:
            values[field] = int(raw)
        except (TypeError, ValueError, OverflowError):
            return None, f"{field} must be an integer"

    if values["age"] <= 0:
        return None, "age must be greater than 0"
    if values["target_timeline_days"] < MIN_TARGET_DAYS:
        return None, f"target_timeline_days must be at least {MIN_TARGET_DAYS}"

    try:
        values["gender"] = GenderEnum(payload.get("gender", GenderEnum.male.value))
    except ValueError:
        return None, "gender must be one of: male, female"

    try:
        values["training_frequency"] = TrainingFrequencyEnum(
            payload.get("training_frequency", TrainingFrequencyEnum.moderate.value)
        )
    except ValueError:
        allowed = ", ".join(level.value for level in TrainingFrequencyEnum)
        return None, f"training_frequency must be one of: {allowed}"

    try:
        values["daily_calorie_goal"] = calculate_daily_calorie_goal(
            current_weight=values["current_weight"],
            ideal_weight=values["ideal_weight"],
            height_cm=values["height"],
            age=values["age"],
            gender=values["gender"],
            activity_level=values["training_frequency"],
            target_days=values["target_timeline_days"]
        )
    except (ValueError, OverflowError):
        return None, "Goal inputs do not produce a finite calorie goal"

    return values, None


class UserProfileService:

    @staticmethod
    def get_user_profile(user_id: str):
        profile = UserProfile.query.filter_by(user_id=user_id).first()
        if not profile:
            return jsonify({"error": "Profile not found"}), 404

        return jsonify(profile.to_dict()), 200

    @staticmethod
    def preview_goal(payload: dict):
        values, error = _parse_goal_payload(payload)
        if error:
            return jsonify({"error": error}), 400

        return jsonify({
            "status": "success",
            "daily_calorie_goal": values["daily_calorie_goal"]
        }), 200

    @staticmethod
    def create_user_profile(user_id: str, payload: dict):
        existing_profile = UserProfile.query.filter_by(user_id=user_id).first()
        if existing_profile:
            return jsonify({"error": "Profile already exists"}), 409

        values, error = _parse_goal_payload(payload)
        if error:
            return jsonify({"error": error}), 400

        # age and gender only feed the goal; they are not stored
        profile = UserProfile(
            user_id=user_id,
            current_weight=values["current_weight"],
            height=values["height"],
            ideal_weight=values["ideal_weight"],
            training_frequency=values["training_frequency"],
            target_timeline_days=values["target_timeline_days"],
            daily_calorie_goal=values["daily_calorie_goal"]
        )

        try:
            db.session.add(profile)
            db.session.commit()
        except IntegrityError:
            # another goal setup for the same user committed first
            db.session.rollback()
            logger.warning("Duplicate profile insert for %s", user_id)
            return jsonify({"error": "Profile already exists"}), 409
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception("Error creating profile for %s", user_id)
            return jsonify({"error": "Error saving profile. Please try again."}), 500

        logger.info("Created profile for %s with goal %s kcal", user_id, profile.daily_calorie_goal)
        return jsonify({
            "status": "success",
            "message": "Profile created",
            "profile": profile.to_dict()
        }), 201
