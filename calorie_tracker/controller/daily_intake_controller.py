from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required
from calorie_tracker.services.daily_intake_service import DailyIntakeService
from calorie_tracker.utils.jwt_utils import get_current_user_id

daily_intake_bp = Blueprint("daily_intake_bp", __name__, url_prefix="/api/v1")

@daily_intake_bp.route("/daily-intake", methods=["GET"])
@jwt_required()
def get_daily_intake():
    user_id = get_current_user_id()
    log_date = request.args.get("date")

    result, error = DailyIntakeService.get_daily_intake(user_id, log_date)
    if error:
        return jsonify({"error": error}), 400

    return jsonify({"status": "success", **result}), 200


@daily_intake_bp.route("/daily-intakes", methods=["GET"])
@jwt_required()
def get_daily_intakes():
    user_id = get_current_user_id()
    start_date = request.args.get("start_date")
    end_date = request.args.get("end_date")

    intakes, error = DailyIntakeService.get_daily_intakes(user_id, start_date, end_date)
    if error:
        return jsonify({"error": error}), 400

    return jsonify({"status": "success", "intakes": intakes}), 200


@daily_intake_bp.route("/calendar", methods=["GET"])
@jwt_required()
def get_calendar():
    user_id = get_current_user_id()
    month = request.args.get("month")

    result, error = DailyIntakeService.get_month_calendar(user_id, month)
    if error:
        return jsonify({"error": error}), 400

    return jsonify({"status": "success", **result}), 200
