from datetime import datetime
from calorie_tracker.extensions import db

from sqlalchemy import Enum as SAEnum

from calorie_tracker.enums.app_enum import TrainingFrequencyEnum


class UserProfile(db.Model):
    __tablename__ = "user_profiles"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(255), nullable=False, unique=True, index=True)

    current_weight = db.Column(db.Float, nullable=False)
    height = db.Column(db.Float, nullable=False)
    ideal_weight = db.Column(db.Float, nullable=False)
    training_frequency = db.Column(
        SAEnum(TrainingFrequencyEnum), nullable=False, default=TrainingFrequencyEnum.moderate
    )
    target_timeline_days = db.Column(db.Integer, nullable=False)
    daily_calorie_goal = db.Column(db.Integer, nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "current_weight": self.current_weight,
            "height": self.height,
            "ideal_weight": self.ideal_weight,
            "training_frequency": TrainingFrequencyEnum(self.training_frequency).value,
            "target_timeline_days": self.target_timeline_days,
            "daily_calorie_goal": self.daily_calorie_goal,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None
        }
