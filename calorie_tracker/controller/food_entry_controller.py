from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required

from calorie_tracker.services.food_entry_service import FoodEntryService
from calorie_tracker.utils.jwt_utils import get_current_user_id

food_entry_bp = Blueprint("food_entry", __name__, url_prefix="/api/v1/food-entries")


@food_entry_bp.route("", methods=["POST"])
@jwt_required()
def add_food_entry():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"error": "Unauthorized"}), 401

    # multipart when a photo is attached, plain JSON otherwise
    if request.mimetype == "multipart/form-data":
        data = request.form.to_dict()
        file = request.files.get("image")
        image_bytes = file.read() if file else None
    else:
        data = request.get_json(silent=True)
        image_bytes = None

    return FoodEntryService.add_food_entry(user_id, data, image_bytes)


@food_entry_bp.route("", methods=["GET"])
@jwt_required()
def get_food_entries():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"error": "Unauthorized"}), 401

    log_date = request.args.get("date")
    return FoodEntryService.get_food_entries(user_id, log_date)
