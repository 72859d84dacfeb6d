import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import sentry_sdk

from resume_optimizer.api.v1.health import router as health_router
from resume_optimizer.api.v1.ats import router as ats_router
from resume_optimizer.api.v1.render import router as render_router
from resume_optimizer.core.cors import cors_options
from resume_optimizer.core.config import settings
from dotenv import load_dotenv
from resume_optimizer.core.lifespan import lifespan

load_dotenv()
logging.basicConfig(level=settings.log_level, format="%(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)

logger = logging.getLogger(__name__)

app = FastAPI(title="Resume Optimizer API", version="0.1.0", lifespan=lifespan)

app.add_middleware(CORSMiddleware, **cors_options())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = [".".join(str(part) for part in err.get("loc", ())) for err in exc.errors()]
    logger.info("request_validation_failed path=%s fields=%s", request.url.path, fields)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request body", "fields": fields},
    )


app.include_router(health_router, prefix="/v1", tags=["Health"])
app.include_router(ats_router, prefix="/v1", tags=["ATS"])
app.include_router(ats_router, prefix="/api", tags=["ATS"], include_in_schema=False)
app.include_router(render_router, prefix="/v1", tags=["Render"])
