import datetime
import logging

from flask import request, jsonify
from flask_jwt_extended import jwt_required

from ..services import FoodRecognitionService
from ..utils import load_image

logger = logging.getLogger(__name__)

def register_routes(app):

    @app.route('/')
    def home():
        return jsonify({'service': 'calorie-tracker', 'status': 'running'}), 200

    @app.route('/api/v1/food-recognition', methods=['GET', 'POST'])
    @jwt_required()
    def recognize_food():
        """
        Meal photo -> food name and macro estimate for prefilling an entry.
        Never fails because of the classifier: it falls back to average values.
        """

        # -------------------------
        # Health check
        # -------------------------
        if request.method == 'GET':
            return jsonify({'status': 'ready'}), 200

        # -------------------------
        # Get image
        # -------------------------
        file = request.files.get('image')
        if not file:
            return jsonify({'error': 'No image uploaded.'}), 400

        image_bytes = file.read()
        try:
            image = load_image(image_bytes)
        except ValueError:
            return jsonify({'error': 'Invalid image file.'}), 400

        # -------------------------
        # Classify + nutrition lookup
        # -------------------------
        service = FoodRecognitionService()
        analysis = service.analyze(image_bytes)
        logger.info("Food recognition result: %s (%s)", analysis['food_name'], analysis['source'])

        return jsonify({
            'status': 'success',
            'analysis': analysis,
            'metadata': {
                'timestamp': datetime.datetime.now().isoformat(),
                'image_size': {
                    'width': image.width,
                    'height': image.height
                }
            }
        }), 200
