from fastapi import APIRouter

router = APIRouter(prefix="/health", tags=["Health Check"])


@router.get("/check", summary="Health Check")
def healthcheck():
    return {"status": "ok", "service": "timetable-rescheduler"}
