from fastapi import APIRouter

from resume_optimizer.ai.factory import get_completion_provider

router = APIRouter()


@router.get("/health", summary="Health Check", description="Check the health status of the application.")
async def health_check():
    provider = get_completion_provider()
    return {"status": "healthy", "llm_configured": bool(getattr(provider, "configured", False))}
