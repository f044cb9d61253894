"""
Check Router - Presentation Layer

This module defines the FastAPI router for threshold checks. The HTTP status
is the whole answer for most callers (load balancers, monitoring probes);
the body only adds the aggregated value or the reason there is none.
"""

from typing import Dict, Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Query, status
from pydantic import ValidationError

from umpire.application.dtos.check_dto import CheckQueryDTO, CheckResponseDTO
from umpire.application.use_cases.check_use_cases import EvaluateCheckUseCase
from umpire.domain.entities.check import CheckOutcome, OutcomeKind
from umpire.presentation.responses import JSONLineResponse
from umpire.presentation.security import require_api_key
from umpire.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Checks"])

OUTCOME_STATUS: Dict[OutcomeKind, int] = {
    OutcomeKind.PASSED: status.HTTP_200_OK,
    OutcomeKind.FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    OutcomeKind.NO_DATA: status.HTTP_404_NOT_FOUND,
    OutcomeKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    OutcomeKind.BACKEND_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
    OutcomeKind.INVALID: status.HTTP_400_BAD_REQUEST,
}


def render_outcome(outcome: CheckOutcome) -> JSONLineResponse:
    """Map a check outcome to its HTTP status and JSON body."""
    return JSONLineResponse(
        status_code=OUTCOME_STATUS[outcome.kind],
        content=CheckResponseDTO.from_outcome(outcome).to_body(),
    )


@router.get(
    "/check",
    response_model=CheckResponseDTO,
    response_model_exclude_none=True,
    dependencies=[Depends(require_api_key)],
    responses={
        400: {"description": "Missing or malformed parameters"},
        401: {"description": "Missing or wrong API key"},
        404: {"description": "Unknown metric, or no values in range"},
        500: {"description": "Value outside the bounds"},
        503: {"description": "Metrics backend unreachable"},
    },
)
@inject
async def check(
    metric: Optional[str] = Query(None, description="Metric name or target"),
    min_value: Optional[str] = Query(
        None, alias="min", description="Fail when the value is below this"
    ),
    max_value: Optional[str] = Query(
        None, alias="max", description="Fail when the value is above this"
    ),
    range_seconds: Optional[str] = Query(
        None, alias="range", description="Window to read, in seconds"
    ),
    empty_ok: Optional[str] = Query(
        None, description="Pass when the window has no values"
    ),
    backend: Optional[str] = Query(
        None, description="'librato' for Librato, Graphite otherwise"
    ),
    aggregate: Optional[str] = Query(
        None, description="avg (default), sum, min or max"
    ),
    evaluate_check_use_case: EvaluateCheckUseCase = Depends(
        Provide["evaluate_check_use_case"]
    ),
) -> JSONLineResponse:
    """
    Evaluate a metric against min/max bounds.

    200 when the aggregated value is within bounds, 500 when it is not; the
    value is reported either way.
    """
    try:
        query = CheckQueryDTO.model_validate(
            {
                "metric": metric,
                "min": min_value,
                "max": max_value,
                "range": range_seconds,
                "empty_ok": empty_ok,
                "backend": backend,
                "aggregate": aggregate,
            }
        )
    except ValidationError as e:
        logger.info(
            "check.parameters_malformed",
            fields=[".".join(str(loc) for loc in err["loc"]) for err in e.errors()],
        )
        return render_outcome(CheckOutcome.invalid())

    outcome = await evaluate_check_use_case.execute(query.to_domain())
    return render_outcome(outcome)
