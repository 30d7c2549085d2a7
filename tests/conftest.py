import io

import pytest
from PIL import Image
from flask_jwt_extended import create_access_token

from calorie_tracker import create_app
from calorie_tracker.config import Config
from calorie_tracker.extensions import db


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    JWT_SECRET_KEY = "test-secret-key-that-is-long-enough-for-hs256"
    CLOUDINARY_CLOUD_NAME = ""
    CLOUDINARY_API_KEY = ""
    CLOUDINARY_API_SECRET = ""
    HF_API_TOKEN = ""
    DEFAULT_DAILY_CALORIE_GOAL = 2000


@pytest.fixture
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_headers(app):
    def _make(user_id="user-1"):
        with app.app_context():
            token = create_access_token(identity=user_id)
        return {"Authorization": f"Bearer {token}"}
    return _make


@pytest.fixture
def auth_headers(make_headers):
    return make_headers()


@pytest.fixture
def image_bytes():
    buffer = io.BytesIO()
    Image.new("RGB", (32, 32), color=(200, 180, 40)).save(buffer, format="PNG")
    return buffer.getvalue()
