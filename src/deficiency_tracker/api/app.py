"""FastAPI application factory."""

import logging
from uuid import UUID

from fastapi import FastAPI, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse

from deficiency_tracker.api.models import (
    DailyRecordResponse,
    FoodEntryRequest,
    LoggedFoodResponse,
    NutrientResponse,
    WarningResponse,
)
from deficiency_tracker.app_logging import configure_logging
from deficiency_tracker.config import parse_demographic
from deficiency_tracker.containers import AppContainer
from deficiency_tracker.domain.errors import StoreUnavailableError, UnitMismatchError
from deficiency_tracker.domain.nutrients import NutrientType


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Deficiency Tracker")
    app.state.container = container

    @app.exception_handler(StoreUnavailableError)
    async def store_unavailable(
        request: Request, exc: StoreUnavailableError
    ) -> JSONResponse:
        logger.error("Store unavailable on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": str(exc)},
        )

    @app.exception_handler(UnitMismatchError)
    async def unit_mismatch(request: Request, exc: UnitMismatchError) -> JSONResponse:
        logger.warning("Unit mismatch on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=422,
            content={
                "detail": str(exc),
                "nutrient": exc.nutrient,
                "expected_unit": exc.expected_unit,
                "actual_unit": exc.actual_unit,
            },
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post(
        "/profiles/{profile_id}/foods",
        status_code=status.HTTP_201_CREATED,
        response_model=LoggedFoodResponse,
    )
    def add_food(
        profile_id: UUID, payload: FoodEntryRequest, request: Request
    ) -> LoggedFoodResponse:
        """Log a food entry on the day it was eaten."""
        state_container: AppContainer = request.app.state.container
        logged = state_container.intake_log_service.add_food(
            profile_id, payload.to_domain(), logged_at=payload.logged_at
        )
        return LoggedFoodResponse(
            entry_id=logged.entry_id,
            daily_log_id=logged.daily_log_id,
            day=logged.day,
        )

    @app.delete(
        "/profiles/{profile_id}/foods/{entry_id}",
        status_code=status.HTTP_204_NO_CONTENT,
    )
    def delete_food(profile_id: UUID, entry_id: UUID, request: Request) -> Response:
        """Delete a logged food entry."""
        state_container: AppContainer = request.app.state.container
        if not state_container.intake_log_service.delete_food(profile_id, entry_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @app.delete(
        "/profiles/{profile_id}/days/{daily_log_id}",
        status_code=status.HTTP_204_NO_CONTENT,
    )
    def delete_day(profile_id: UUID, daily_log_id: UUID, request: Request) -> Response:
        """Delete a day and every food entry logged on it."""
        state_container: AppContainer = request.app.state.container
        if not state_container.intake_log_service.delete_day(profile_id, daily_log_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @app.get("/profiles/{profile_id}/days")
    def list_days(profile_id: UUID, request: Request) -> dict[str, object]:
        """Return aggregated daily totals, newest first."""
        state_container: AppContainer = request.app.state.container
        records = state_container.intake_log_service.fetch_all_daily_records(
            profile_id
        )
        return {
            "days": [
                DailyRecordResponse.from_domain(record).model_dump(mode="json")
                for record in records
            ]
        }

    @app.get("/profiles/{profile_id}/deficiencies")
    def deficiencies(
        profile_id: UUID,
        request: Request,
        demographic: str | None = None,
        fast_track: bool | None = None,
    ) -> dict[str, object]:
        """Return deficiency warnings ranked by severity."""
        state_container: AppContainer = request.app.state.container
        try:
            group = parse_demographic(demographic, state_container.default_demographic)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        assumes_prior_deficiency = (
            state_container.settings.fast_track_default
            if fast_track is None
            else fast_track
        )
        warnings = state_container.intake_log_service.analyze(
            profile_id, group, assumes_prior_deficiency=assumes_prior_deficiency
        )
        return {
            "demographic": group.value,
            "fast_track": assumes_prior_deficiency,
            "warnings": [
                WarningResponse.from_domain(warning).model_dump(mode="json")
                for warning in warnings
            ],
        }

    @app.get("/nutrients/{nutrient}", response_model=NutrientResponse)
    async def nutrient_detail(
        nutrient: NutrientType, request: Request
    ) -> NutrientResponse:
        """Return reference data for a nutrient."""
        state_container: AppContainer = request.app.state.container
        data = state_container.knowledge_base.get(nutrient)
        if data is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return NutrientResponse.from_domain(nutrient, data)

    return app
