import logging
from typing import Any

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from resume_optimizer.ai.errors import ConfigError, UpstreamError
from resume_optimizer.ai.factory import get_completion_provider, get_models
from resume_optimizer.ai.types import CompletionProvider
from resume_optimizer.parsing.json_recovery import RecoveryError
from resume_optimizer.schemas.ats import AtsAction, AtsRequest
from resume_optimizer.services.ats_service import analyze_ats
from resume_optimizer.services.rewrite_service import rewrite_for_job

router = APIRouter()
logger = logging.getLogger(__name__)

SUPPORTED_ACTIONS: set[AtsAction] = {"analyzeATS", "rewriteForJob"}


def _error(status_code: int, message: str, **extra: Any) -> JSONResponse:
    body: dict[str, Any] = {"error": message}
    body.update(extra)
    return JSONResponse(status_code=status_code, content=body)


@router.post("/ats")
def ats_action(
    request: AtsRequest,
    provider: CompletionProvider = Depends(get_completion_provider),
    models: tuple[str, ...] = Depends(get_models),
):
    action = request.action
    if action not in SUPPORTED_ACTIONS:
        return _error(status.HTTP_400_BAD_REQUEST, "Unknown action")

    payload = request.payload
    resume = (payload.resume if payload else "").strip()
    job_description = (payload.job_description if payload else "").strip()
    if not resume or not job_description:
        return _error(status.HTTP_400_BAD_REQUEST, "resume and jobDescription are required")

    try:
        if action == "analyzeATS":
            return JSONResponse(analyze_ats(resume, job_description, provider=provider, models=models))

        outcome = rewrite_for_job(
            resume,
            job_description,
            provider=provider,
            models=models,
            rewrite_prompt=payload.rewrite_prompt if payload else None,
        )
        return JSONResponse(status_code=outcome.http_status, content=outcome.to_response())
    except ConfigError as exc:
        logger.error("ats_action_config_error action=%s: %s", action, exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))
    except UpstreamError as exc:
        logger.warning("ats_action_upstream_error action=%s status=%s: %s", action, exc.status, exc)
        return _error(status.HTTP_502_BAD_GATEWAY, str(exc))
    except RecoveryError as exc:
        logger.warning("ats_action_unparseable action=%s: %s", action, exc)
        return _error(status.HTTP_502_BAD_GATEWAY, "Could not parse response as JSON")
    except Exception as exc:  # noqa: BLE001 - callers always get a JSON error body
        logger.exception("ats_action_failed action=%s", action)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc) or "Server error")
