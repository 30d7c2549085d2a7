import os

import cloudinary
from dotenv import load_dotenv
load_dotenv()

class Config:
    # JWT (issued by the identity provider, verified here)
    SECRET_KEY = os.environ.get("SECRET_KEY", "change-me")
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY", "change-me-jwt")
    JWT_ALGORITHM = "HS256"
    JWT_TOKEN_LOCATION = ["headers"]
    JWT_HEADER_NAME = "Authorization"
    JWT_HEADER_TYPE = "Bearer"
    JWT_DECODE_AUDIENCE = os.environ.get("JWT_DECODE_AUDIENCE") or None
    JWT_ACCESS_TOKEN_EXPIRES = False

    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", "sqlite:///calorie_tracker.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # bytes
    MAX_CONTENT_LENGTH = int(os.environ.get("MAX_CONTENT_LENGTH", str(10 * 1024 * 1024)))

    CLOUDINARY_CLOUD_NAME = os.environ.get("CLOUDINARY_CLOUD_NAME", "")
    CLOUDINARY_API_KEY = os.environ.get("CLOUDINARY_API_KEY", "")
    CLOUDINARY_API_SECRET = os.environ.get("CLOUDINARY_API_SECRET", "")
    FOOD_IMAGE_FOLDER = "food-images"

    # ======= FOOD RECOGNITION =======
    HF_API_URL = os.environ.get(
        "HF_API_URL", "https://api-inference.huggingface.co/models/facebook/detr-resnet-50"
    )
    HF_API_TOKEN = os.environ.get("HF_API_TOKEN", "")
    HF_TIMEOUT = float(os.environ.get("HF_TIMEOUT", "30"))
    CLASSIFIER_CONFIDENCE = float(os.environ.get("CLASSIFIER_CONFIDENCE", "0.25"))

    DEFAULT_DAILY_CALORIE_GOAL = int(os.environ.get("DEFAULT_DAILY_CALORIE_GOAL", "2000"))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    @classmethod
    def init_cloudinary(cls):
        cloudinary.config(
            cloud_name=cls.CLOUDINARY_CLOUD_NAME,
            api_key=cls.CLOUDINARY_API_KEY,
            api_secret=cls.CLOUDINARY_API_SECRET,
            secure=True
        )
