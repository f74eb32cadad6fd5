"""HTTP surface: ``GET /api/crossword``."""

from __future__ import annotations

from typing import Optional

from flask import Blueprint, Flask, current_app, jsonify, request

from ..core.exceptions import InvalidDateError
from ..data.word_tables import WordTables
from ..utils.logger import get_logger
from .daily import DailyCrosswordService


LOGGER = get_logger(__name__)

SERVICE_KEY = "daily_crossword"

crossword_api = Blueprint("crossword", __name__, url_prefix="/api")


def _service() -> DailyCrosswordService:
    return current_app.extensions[SERVICE_KEY]


@crossword_api.route("/crossword", methods=["GET"])
def get_crossword():
    try:
        payload = _service().build(
            lang=request.args.get("lang"),
            difficulty=request.args.get("difficulty"),
            day=request.args.get("date"),
        )
    except InvalidDateError as exc:
        LOGGER.info("Rejected crossword request: %s", exc)
        return jsonify({"error": str(exc)}), 400
    return jsonify(payload), 200


def create_app(tables: Optional[WordTables] = None, sequence: str = "hash") -> Flask:
    app = Flask(__name__)
    app.json.sort_keys = False
    app.extensions[SERVICE_KEY] = DailyCrosswordService(
        tables or WordTables.load(), sequence=sequence
    )
    app.register_blueprint(crossword_api)
    return app
