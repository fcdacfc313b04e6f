"""Health check endpoint.

Learn: Simple GET endpoint that verifies the server is running and the
database is reachable. 200 when healthy, 503 when the database is down.
"""

from fastapi import APIRouter, Depends

from imagesmith.api.dependencies import get_account_store
from imagesmith.api.responses import success_response
from imagesmith.db.store import AccountStore
from imagesmith.schemas.account import Envelope, HealthRead

router = APIRouter()


@router.get("/health-check", response_model=Envelope[HealthRead])
async def health_check(store: AccountStore = Depends(get_account_store)):
    """Check server health and database connectivity."""
    if await store.ping():
        return success_response(
            200, "health check", HealthRead(status="healthy", database="healthy")
        )
    return success_response(
        503, "health check", HealthRead(status="unhealthy", database="unhealthy")
    )
