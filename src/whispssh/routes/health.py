from fastapi import APIRouter

from whispssh.dependencies import RegistryDep
from whispssh.models import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(registry: RegistryDep) -> HealthResponse:
    return HealthResponse(status="ok", channels=await registry.count())
