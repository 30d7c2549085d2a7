import logging

from flask import Flask
from .config import Config
from .routes import register_routes
from .extensions import db, jwt, migrate


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )

    db.init_app(app)
    jwt.init_app(app)
    migrate.init_app(app, db)
    config_object.init_cloudinary()
    register_routes(app)

    with app.app_context():
        from calorie_tracker.models import (
            user_profile,
            food_entry
        )
        db.create_all()

    from calorie_tracker.controller.user_profile_controller import user_profile_bp
    app.register_blueprint(user_profile_bp)

    from calorie_tracker.controller.food_entry_controller import food_entry_bp
    app.register_blueprint(food_entry_bp)

    from calorie_tracker.controller.daily_intake_controller import daily_intake_bp
    app.register_blueprint(daily_intake_bp)

    return app
