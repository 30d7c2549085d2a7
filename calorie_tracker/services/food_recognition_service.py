import base64
import logging
import math

import requests
from flask import current_app, has_app_context

from .services import BaseService
from ..config import Config
from ..data import DEFAULT_FOOD_NAME, DEFAULT_NUTRITION
from ..utils import get_nutrition_by_name

logger = logging.getLogger(__name__)


def _score(prediction):
    """
    Finite float score of a prediction, None when missing or malformed.
    """
    try:
        score = float(prediction.get("score", 0))
    except (TypeError, ValueError):
        return None
    return score if math.isfinite(score) else None


class FoodRecognitionService(BaseService):
    """
    Best-effort nutrition estimate for a meal photo.

    One call to the remote image classifier; its top label is looked up in the
    static nutrition table. A missing token or any failure of the remote call
    yields the placeholder estimate instead of an error.
    """

    def __init__(self, api_url=None, api_token=None, timeout=None, confidence=None):
        super().__init__()
        config = current_app.config if has_app_context() else {}
        self.api_url = api_url or config.get("HF_API_URL", Config.HF_API_URL)
        self.api_token = api_token if api_token is not None else config.get("HF_API_TOKEN", Config.HF_API_TOKEN)
        self.timeout = timeout or config.get("HF_TIMEOUT", Config.HF_TIMEOUT)
        self.confidence = confidence if confidence is not None else config.get(
            "CLASSIFIER_CONFIDENCE", Config.CLASSIFIER_CONFIDENCE
        )

    def analyze(self, image_bytes: bytes) -> dict:
        label = self.classify(image_bytes)
        if not label:
            return self.fallback_result()

        nutrition = get_nutrition_by_name(label)
        nutrition["source"] = "classifier"
        return nutrition

    def classify(self, image_bytes: bytes):
        """
        Top label from the remote classifier, or None when it is unavailable.
        """
        if not self.api_token:
            logger.info("No classifier token configured, using fallback nutrition")
            return None

        try:
            response = requests.post(
                self.api_url,
                headers={
                    "Authorization": f"Bearer {self.api_token}",
                    "Content-Type": "application/json",
                },
                json={"inputs": base64.b64encode(image_bytes).decode("utf-8")},
                timeout=self.timeout
            )
            response.raise_for_status()
            predictions = response.json()
        except (requests.RequestException, ValueError) as error:
            logger.warning("Classifier request failed, using fallback: %s", error)
            return None

        return self.extract_label(predictions)

    def extract_label(self, predictions):
        if not isinstance(predictions, list):
            logger.warning("Unexpected classifier response: %r", predictions)
            return None

        candidates = []
        for p in predictions:
            if not isinstance(p, dict) or not p.get("label"):
                continue
            score = _score(p)
            if score is not None and score >= self.confidence:
                candidates.append((score, str(p["label"])))
        if not candidates:
            return None

        return max(candidates, key=lambda c: c[0])[1]

    @staticmethod
    def fallback_result() -> dict:
        return {
            "food_name": DEFAULT_FOOD_NAME,
            "calories": DEFAULT_NUTRITION["Calories"],
            "protein": DEFAULT_NUTRITION["Protein"],
            "carbs": DEFAULT_NUTRITION["Carbs"],
            "fat": DEFAULT_NUTRITION["Fat"],
            "source": "fallback"
        }
