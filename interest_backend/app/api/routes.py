"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from interest_backend.core.ping import get_app_label, get_ping_message
from interest_backend.core.report import available_modes, calculation_report
from interest_backend.domain.interest import CalculationMode, InterestValidationError
from interest_backend.models import RawInput
from interest_backend.schemas.interest import ErrorDetail, ErrorResponse
from interest_backend.schemas.ping import PingResponse

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(InterestValidationError)
def _handle_interest_validation_error(exc: InterestValidationError):
    """Rejected form input; the client shows the message and lets the user retry."""
    logger.info("rejected input (%s): %s", exc.kind.value, exc.message)
    response = ErrorResponse(error=ErrorDetail(**exc.to_dict()))
    return jsonify(response.model_dump()), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(
        message=get_ping_message(),
        app=get_app_label(current_app.config["SETTINGS"]),
    )
    return jsonify(response.model_dump())


@api_bp.get("/modes")
def modes() -> Any:
    """Describe the calculation modes for the mode switcher."""
    return jsonify(available_modes().model_dump())


@api_bp.post("/calc/<mode>")
def calc(mode: str) -> Any:
    """Validate the submitted form and calculate interest in the requested mode."""
    try:
        calculation_mode = CalculationMode(mode)
    except ValueError:
        response = ErrorResponse(
            error=ErrorDetail(kind="unknown_mode", message=f"Unknown calculation mode: {mode}")
        )
        return jsonify(response.model_dump()), HTTPStatus.NOT_FOUND

    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = RawInput.model_validate(raw_payload)
    result = calculation_report(calculation_mode, payload)
    return jsonify(result.model_dump())
