"""
API Routes: Health Check
"""

from fastapi import APIRouter, Depends

from api.v1.schemas import HealthResponse
from api.v1.dependencies import get_transaction_store
from application.ports.transaction_store import ITransactionStore
from infrastructure.database.memory_store import InMemoryTransactionStore


router = APIRouter()

SERVICE_NAME = "mpesa-statement-importer"
SERVICE_VERSION = "1.0.0"


@router.get("/health", response_model=HealthResponse)
async def health_check(
    store: ITransactionStore = Depends(get_transaction_store)
):
    """Health check endpoint"""

    store_type = "memory" if isinstance(store, InMemoryTransactionStore) else "postgres"

    try:
        healthy = await store.health_check()
        store_status = "connected" if healthy else "unavailable"
    except Exception as e:
        store_status = f"error: {str(e)}"

    return HealthResponse(
        status="healthy" if store_status == "connected" else "degraded",
        service=SERVICE_NAME,
        version=SERVICE_VERSION,
        architecture="hexagonal",
        store_type=store_type,
        store_status=store_status
    )
