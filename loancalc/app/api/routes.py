"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

import structlog
from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from loancalc import __version__
from loancalc.core.amortization import compute_amortization
from loancalc.domain.errors import AmortizationError, InvalidInputError
from loancalc.schemas.amortization import AmortizationRequest, AmortizationResponse
from loancalc.schemas.ping import PingResponse

logger = structlog.get_logger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("payload_rejected", path=request.path, error_count=exc.error_count())
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.errorhandler(AmortizationError)
def _handle_amortization_error(exc: AmortizationError):
    """Bad inputs are the caller's fault; degenerate or overflowing loans are unprocessable."""
    status = HTTPStatus.BAD_REQUEST if isinstance(exc, InvalidInputError) else HTTPStatus.UNPROCESSABLE_ENTITY
    logger.warning("calculation_rejected", path=request.path, kind=exc.kind, errors=exc.errors)
    return jsonify({"error": exc.errors, "kind": exc.kind}), status


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message="pong", service="loancalc", version=__version__)
    return jsonify(response.model_dump())


@api_bp.post("/calc/amortization")
def amortization() -> Any:
    """Compute the payment, totals and full schedule for a fixed-rate loan."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = AmortizationRequest.model_validate(raw_payload)
    loan = payload.to_loan_request()
    result = compute_amortization(loan)
    logger.info(
        "amortization_computed",
        periods=result.number_of_periods,
        payments_per_year=loan.payments_per_year,
        continuous=loan.continuous_compounding,
    )
    response = AmortizationResponse.from_result(result, loan)
    return jsonify(response.model_dump())
