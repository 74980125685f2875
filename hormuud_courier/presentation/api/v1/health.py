import redis.asyncio as redis
import structlog
from fastapi import APIRouter, Depends
from redis.exceptions import RedisError

from ....infrastructure.logging import Timer
from ..dependencies import get_redis_client

router = APIRouter(tags=["health"])
logger = structlog.get_logger()


@router.get("/health", summary="Health check")
async def health() -> dict:
    """Basic health check for load balancer."""
    return {"status": "healthy"}


@router.get("/health/ready", summary="Readiness check")
async def readiness(redis_client: redis.Redis = Depends(get_redis_client)) -> dict:
    """Readiness check. Sends still work without Redis, so a failure only degrades."""
    checks = {}

    try:
        with Timer() as t:
            await redis_client.ping()
        checks["redis"] = {"status": "healthy", "latency_ms": t.duration_ms}
    except RedisError as e:
        logger.error("Redis health check failed", error=str(e))
        checks["redis"] = {"status": "unhealthy", "error": str(e)}

    all_healthy = all(c.get("status") == "healthy" for c in checks.values())

    return {
        "status": "ready" if all_healthy else "degraded",
        "checks": checks,
    }
