from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required
from calorie_tracker.services.user_profile_service import UserProfileService
from calorie_tracker.utils.jwt_utils import get_current_user_id

user_profile_bp = Blueprint("user_profile", __name__, url_prefix="/api/v1/user-profile")


@user_profile_bp.route("", methods=["GET"])
@jwt_required()
def get_user_profile():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"error": "Unauthorized"}), 401

    return UserProfileService.get_user_profile(user_id)


@user_profile_bp.route("", methods=["POST"])
@jwt_required()
def create_user_profile():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"error": "Unauthorized"}), 401

    data = request.get_json(silent=True)
    return UserProfileService.create_user_profile(user_id, data)


@user_profile_bp.route("/goal-preview", methods=["POST"])
@jwt_required()
def preview_goal():
    data = request.get_json(silent=True)
    return UserProfileService.preview_goal(data)
