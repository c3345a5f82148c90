"""HTTP routes: search, related keywords and discovery path."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, Optional, Tuple

from flask import Blueprint, jsonify, request

from ..errors import ValidationError
from ..services.discovery import assemble_discovery_path
from ..services.keywords import generate_related_keywords
from ..services.search import search_events
from ..utils.datetime_utils import parse_date
from ..utils.text_cleaning import normalize_keyword

logger = logging.getLogger(__name__)

api = Blueprint("api", __name__, url_prefix="/api")


def _payload() -> Dict[str, Any]:
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def _require_keyword(payload: Dict[str, Any]) -> str:
    keyword = normalize_keyword(payload.get("keyword"))
    if not keyword:
        raise ValidationError("Keyword is required")
    return keyword


def _optional_date(payload: Dict[str, Any], field: str) -> Optional[date]:
    raw = payload.get(field)
    if raw in (None, ""):
        return None
    parsed = parse_date(raw)
    if parsed is None:
        raise ValidationError(f"Invalid date: {raw}")
    return parsed


def _date_range(payload: Dict[str, Any]) -> Tuple[Optional[date], Optional[date]]:
    return _optional_date(payload, "startDate"), _optional_date(payload, "endDate")


def _server_error(message: str):
    return jsonify({"error": message}), 500


@api.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    return jsonify({"error": str(exc)}), exc.status_code


@api.post("/search")
def search():
    payload = _payload()
    keyword = _require_keyword(payload)
    start_date, end_date = _date_range(payload)

    try:
        results = search_events(keyword, start_date, end_date)
    except Exception:
        logger.exception("Error searching")
        return _server_error("An error occurred while searching")

    return jsonify([event.to_dict() for event in results])


@api.post("/related-keywords")
def related_keywords():
    keyword = _require_keyword(_payload())

    try:
        keywords = generate_related_keywords(keyword)
    except Exception:
        logger.exception("Error generating related keywords")
        return _server_error("An error occurred while generating related keywords")

    return jsonify({"relatedKeywords": keywords})


@api.post("/discovery-path")
def discovery_path():
    keyword = _require_keyword(_payload())

    try:
        path = assemble_discovery_path(keyword)
    except Exception:
        logger.exception("Error creating discovery path")
        return _server_error("An error occurred while creating discovery path")

    return jsonify([event.to_dict() for event in path])

__all__ = ["api"]
