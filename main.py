from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.trustedhost import TrustedHostMiddleware
from dotenv import load_dotenv
from api.timetable import router as timetable_router
from api.healthcheck import router as healthcheck_router
from utils.logger import setup_logging
import os
import logging
import secrets

load_dotenv()
setup_logging()

API_PREFIX = "/api"

# env
API_KEY = os.getenv("API_KEY")
ALLOWED_HOSTS = [h for h in os.getenv("ALLOWED_HOSTS", "").split(",") if h] or ["*"]

app = FastAPI(title="Timetable Rescheduler API")
app.include_router(timetable_router, prefix=API_PREFIX)
app.include_router(healthcheck_router, prefix=API_PREFIX)

# Interactive docs and every health route stay reachable without the API key
PUBLIC_PATHS = {app.openapi_url, app.docs_url, app.redoc_url} | {
    API_PREFIX + route.path for route in healthcheck_router.routes
}

app.add_middleware(TrustedHostMiddleware, allowed_hosts=ALLOWED_HOSTS)


# API key middleware
@app.middleware("http")
async def api_key_guard(request: Request, call_next):
    if request.method == "OPTIONS" or request.url.path in PUBLIC_PATHS:
        return await call_next(request)

    if not API_KEY:
        logging.warning("API_KEY not set; API key auth is DISABLED (dev mode).")
        return await call_next(request)

    client_key = request.headers.get("x-api-key")
    if not client_key or not secrets.compare_digest(str(client_key), str(API_KEY)):
        return JSONResponse(status_code=401, content={"detail": "Unauthorized"})

    return await call_next(request)
