from fastapi import APIRouter
from profile_hub.api.v1 import health, auth, profile
from profile_hub.core.config import settings

api_router = APIRouter(prefix=settings.API_PREFIX)

api_router.include_router(health.router, tags=['health'])
api_router.include_router(auth.router)
api_router.include_router(profile.router)
