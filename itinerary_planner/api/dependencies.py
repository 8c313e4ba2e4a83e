from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import FastAPI

from itinerary_planner.api.planning_service import PlanningService
from itinerary_planner.core.config import ApiSettings


@lru_cache(maxsize=1)
def get_planning_service() -> PlanningService:
    settings = ApiSettings.from_env()
    return PlanningService(settings)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    try:
        yield
    finally:
        if get_planning_service.cache_info().currsize:
            service = get_planning_service()
            await service.close()
