"""FastAPI surface for itinerary generation and place enrichment."""
from __future__ import annotations

import os
# Load environment variables from .env file
from dotenv import load_dotenv

# Load .env file before any other imports that might need environment variables
load_dotenv()


import logging
from typing import Dict, List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from itinerary_planner.api.dependencies import get_planning_service, lifespan
from itinerary_planner.api.schemas import DailyOptionsPayload, PlanRequest
from itinerary_planner.core.schemas import Day, TripPlan

logger = logging.getLogger(__name__)

try:  # pragma: no cover - exercised through import side effects
    import sentry_sdk
except ImportError:  # pragma: no cover - only triggers in lean environments
    sentry_sdk = None  # type: ignore[assignment]
else:  # pragma: no cover - runtime configuration
    sentry_sdk.init(
        dsn=os.getenv("SENTRY_DSN"),
        enable_logs=True,
        traces_sample_rate=1.0,
    )

app = FastAPI(title="Itinerary Planner API", version="0.1.0", lifespan=lifespan)

origins = [
    "http://localhost:3000",
    "http://localhost:5173",
]


app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.post("/api/v1/plan/generate", response_model=TripPlan)
async def generate_plan(payload: PlanRequest) -> TripPlan:
    """Generate a complete multi-day trip plan from a single text prompt.

    The model's itinerary is enriched before it is returned: every hotel and
    activity whose Google Places lookup succeeded carries ``place_details``.
    Lookups that fail or find nothing simply leave that field empty.

    Example JSON payload:
        ```json
        {"prompt": "Plan a 3 day trip to Rome"}
        ```

    Raises:
        HTTPException: 400 for invalid input, 500 for generation errors
    """

    logger.info("Trip plan request received")
    service = get_planning_service()
    try:
        plan = await service.generate_trip_plan(payload.prompt)
    except ValueError as exc:
        logger.error(f"Value error during plan generation: {str(exc)}")
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception as exc:
        logger.error(f"Unexpected error during plan generation: {str(exc)}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    if plan is None:
        raise HTTPException(status_code=500, detail="Model returned no trip plan")
    return plan


@app.post("/api/v1/plan/options/day", response_model=List[Day])
async def generate_daily_options(payload: DailyOptionsPayload) -> List[Day]:
    """Generate alternative enriched plans for a single day.

    Example JSON payload:
        ```json
        {
            "location": "Rome",
            "day_number": 2,
            "preferences": "art, low budget",
            "number_of_options": 3
        }
        ```
    """

    logger.info(f"Daily options request received: {payload}")
    service = get_planning_service()
    try:
        return await service.generate_daily_options(payload)
    except ValueError as exc:
        logger.error(f"Value error during daily options: {str(exc)}")
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception as exc:
        logger.error(f"Unexpected error during daily options: {str(exc)}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@app.get("/health")
async def health_check() -> Dict[str, str]:
    """Simple health endpoint used for readiness probes."""

    return {"status": "healthy", "service": "itinerary-planner-api"}
