import logging
import math
from datetime import date

from flask import jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError

from calorie_tracker.extensions import db
from calorie_tracker.models import FoodEntry
from calorie_tracker.utils import load_image
from calorie_tracker.utils.cloudinary_helper import upload_food_image

logger = logging.getLogger(__name__)

MACRO_FIELDS = ("calories", "protein", "carbs", "fat")


def parse_log_date(raw):
    """
    ISO date string to date, today when empty. Raises ValueError on bad input.
    """
    return date.fromisoformat(raw) if raw else date.today()


class FoodEntryService:

    @staticmethod
    def upload_image(user_id: str, image_bytes: bytes):
        """
        Store the meal photo and return its URL, or None when the upload is
        skipped or fails. The entry is saved either way.
        """
        config = current_app.config
        if not (config.get("CLOUDINARY_CLOUD_NAME") and config.get("CLOUDINARY_API_KEY")
                and config.get("CLOUDINARY_API_SECRET")):
            logger.warning("Cloudinary credentials not found - saving entry without image.")
            return None

        try:
            image = load_image(image_bytes)
            return upload_food_image(image, user_id, folder=config.get("FOOD_IMAGE_FOLDER", "food-images"))
        except Exception as e:
            logger.warning("Image upload failed for %s, saving entry without image: %s", user_id, e)
            return None

    @staticmethod
    def add_food_entry(user_id: str, payload: dict, image_bytes: bytes | None = None):
        if not isinstance(payload, dict):
            return jsonify({"error": "Invalid request body"}), 400

        try:
            log_date = parse_log_date(payload.get("date"))
        except ValueError:
            return jsonify({"error": "Invalid date format, use YYYY-MM-DD"}), 400

        food_name = (payload.get("food_name") or "").strip()
        if not food_name:
            return jsonify({"error": "food_name is required"}), 400

        macros = {}
        for field in MACRO_FIELDS:
            try:
                macros[field] = float(payload.get(field, 0) or 0)
            except (TypeError, ValueError):
                return jsonify({"error": f"{field} must be a number"}), 400
            if not math.isfinite(macros[field]):
                return jsonify({"error": f"{field} must be a finite number"}), 400
            if macros[field] < 0:
                return jsonify({"error": f"{field} must be >= 0"}), 400

        image_url = None
        if image_bytes:
            image_url = FoodEntryService.upload_image(user_id, image_bytes)

        entry = FoodEntry(
            user_id=user_id,
            date=log_date,
            food_name=food_name,
            image_url=image_url,
            **macros
        )

        try:
            db.session.add(entry)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception("Error saving food entry for %s", user_id)
            return jsonify({"error": "Error saving entry. Please try again."}), 500

        logger.info("Saved food entry %s for %s on %s", entry.id, user_id, log_date)
        return jsonify({
            "status": "success",
            "entry": entry.to_dict()
        }), 201

    @staticmethod
    def get_entries_between(user_id: str, start: date, end: date):
        return (
            FoodEntry.query
            .filter_by(user_id=user_id)
            .filter(FoodEntry.date >= start)
            .filter(FoodEntry.date <= end)
            .order_by(FoodEntry.date.asc(), FoodEntry.created_at.asc(), FoodEntry.id.asc())
            .all()
        )

    @staticmethod
    def get_food_entries(user_id: str, log_date: str | None):
        try:
            day = parse_log_date(log_date)
        except ValueError:
            return jsonify({"error": "Invalid date format, use YYYY-MM-DD"}), 400

        entries = FoodEntryService.get_entries_between(user_id, day, day)
        return jsonify({
            "status": "success",
            "date": day.isoformat(),
            "entries": [e.to_dict() for e in entries]
        }), 200
