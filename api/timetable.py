from fastapi import APIRouter, HTTPException
import logging
import traceback
from core.constraints import validate, is_order_valid
from core.state import TimetableState
from docs.timetable.solve import (
    timetable_solve_description,
    timetable_validate_description,
    timetable_propagate_description,
)
from exceptions.custom_errors import *
from scheduler.propagation import propagate_all
from scheduler.solver import solve_timetable
from schemas.timetable.activity import ActivityRecord, records_to_timetable, timetable_to_records
from schemas.timetable.solve import SolveRequest, ValidateRequest, PropagateRequest
from utils.constants import MAX_CANDIDATES, SEARCH_TIMEOUT_SECONDS

router = APIRouter(prefix="/timetable", tags=["Timetable"])
logger = logging.getLogger(__name__)


def _check_day_bounds(day_start: int, day_end: int):
    if day_start >= day_end:
        raise InvalidDayBoundsError(
            f"Day start ({day_start}) must be before day end ({day_end})."
        )


# re-solve timetable
@router.post(
    "/solve",
    response_model=dict,
    description=timetable_solve_description,
    summary="Re-solve Timetable",
)
def solve(request: SolveRequest):
    try:
        state = TimetableState()
        state.set_default(records_to_timetable(request.activities))
        state.set_clock(request.now)

        result = solve_timetable(
            state,
            request.dayStart,
            request.dayEnd,
            notify=False,
            max_candidates=request.maxCandidates or MAX_CANDIDATES,
            timeout_seconds=request.timeoutSeconds or SEARCH_TIMEOUT_SECONDS,
        )

        return {
            "status": result.status.value,
            "score": result.score,
            "candidateCount": result.candidate_count,
            "truncated": result.truncated,
            "activities": timetable_to_records(result.timetable),
        }

    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))
    except Exception as e:
        tb = traceback.format_exc()
        logger.error(f"Timetable solve failed: {e}\n{tb}")
        raise HTTPException(status_code=500, detail=str(e))


# validate timetable
@router.post(
    "/validate",
    response_model=dict,
    description=timetable_validate_description,
    summary="Validate Timetable",
)
def validate_timetable(request: ValidateRequest):
    try:
        _check_day_bounds(request.dayStart, request.dayEnd)
        timetable = records_to_timetable(request.activities)
        result = validate(timetable, request.dayStart, request.dayEnd)

        violations = [
            {
                "type": v.type,
                "activity": ActivityRecord.from_activity(v.activity).model_dump() if v.activity else None,
                "other": ActivityRecord.from_activity(v.other).model_dump() if v.other else None,
                "message": v.message,
            }
            for v in result.violations
        ]
        return {
            "valid": result.valid,
            "orderValid": is_order_valid(timetable),
            "violations": violations,
        }

    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))


# propagate timetable
@router.post(
    "/propagate",
    response_model=dict,
    description=timetable_propagate_description,
    summary="Propagate Timetable",
)
def propagate(request: PropagateRequest):
    try:
        _check_day_bounds(request.dayStart, request.dayEnd)
        timetable = records_to_timetable(request.activities)
        propagate_all(timetable, request.dayStart, request.dayEnd)
        return {"activities": timetable_to_records(timetable)}

    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))
