"""FastAPI application factory."""

import logging
from dataclasses import asdict
from datetime import date
from typing import Annotated
from uuid import UUID

from fastapi import FastAPI, Path, Request, status
from fastapi.responses import JSONResponse

from recomp_tracker.api.models import CustomFoodRequest, EntryRequest, ProfileRequest
from recomp_tracker.app_logging import configure_logging
from recomp_tracker.containers import AppContainer
from recomp_tracker.domain.errors import InvalidUnitError, RecompTrackerError
from recomp_tracker.domain.logs import DailyLog


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.exception_handler(RecompTrackerError)
    async def not_found(request: Request, exc: RecompTrackerError) -> JSONResponse:
        logger.info("Request failed: %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.exception_handler(InvalidUnitError)
    async def invalid_unit(request: Request, exc: InvalidUnitError) -> JSONResponse:
        logger.info(
            "Request rejected: %s %s: %s", request.method, request.url.path, exc
        )
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.put("/users/{user_id}/profile")
    async def save_profile(
        user_id: UUID, payload: ProfileRequest, request: Request
    ) -> dict[str, object]:
        """Create or update a profile and return its fresh targets."""
        state_container: AppContainer = request.app.state.container
        profile = state_container.profile_service.save_profile(
            payload.to_profile(user_id)
        )
        return {
            "profile": asdict(profile),
            **_targets_payload(state_container, user_id),
        }

    @app.get("/users/{user_id}/profile")
    async def get_profile(user_id: UUID, request: Request) -> dict[str, object]:
        """Return the stored profile."""
        state_container: AppContainer = request.app.state.container
        profile = state_container.profile_service.get_profile(user_id)
        return {"profile": asdict(profile)}

    @app.get("/users/{user_id}/targets")
    async def get_targets(user_id: UUID, request: Request) -> dict[str, object]:
        """Return targets computed from the current profile."""
        state_container: AppContainer = request.app.state.container
        return _targets_payload(state_container, user_id)

    @app.get("/users/{user_id}/foods")
    async def list_foods(user_id: UUID, request: Request) -> dict[str, object]:
        """Return the merged food catalog."""
        state_container: AppContainer = request.app.state.container
        catalog = state_container.catalog_service.catalog_for(user_id)
        return {"foods": [asdict(food) for food in catalog.list_foods()]}

    @app.post("/users/{user_id}/foods", status_code=status.HTTP_201_CREATED)
    async def add_custom_food(
        user_id: UUID, payload: CustomFoodRequest, request: Request
    ) -> dict[str, object]:
        """Create a custom food."""
        state_container: AppContainer = request.app.state.container
        food = state_container.catalog_service.add_custom_food(
            user_id, payload.to_food()
        )
        return {"food": asdict(food)}

    @app.get("/users/{user_id}/logs")
    async def list_logs(user_id: UUID, request: Request) -> dict[str, object]:
        """Return cached totals for every logged day."""
        state_container: AppContainer = request.app.state.container
        rows = state_container.daily_log_service.list_daily_totals(user_id)
        return {"days": [asdict(row) for row in rows]}

    @app.get("/users/{user_id}/today")
    async def get_today(user_id: UUID, request: Request) -> dict[str, object]:
        """Return today's log in server local time."""
        state_container: AppContainer = request.app.state.container
        log = state_container.daily_log_service.get_daily_log(user_id, date.today())
        return _log_payload(log)

    @app.get("/users/{user_id}/logs/{day}")
    async def get_log(user_id: UUID, day: date, request: Request) -> dict[str, object]:
        """Return a day's entries and totals."""
        state_container: AppContainer = request.app.state.container
        log = state_container.daily_log_service.get_daily_log(user_id, day)
        return _log_payload(log)

    @app.post(
        "/users/{user_id}/logs/{day}/entries", status_code=status.HTTP_201_CREATED
    )
    async def add_entry(
        user_id: UUID, day: date, payload: EntryRequest, request: Request
    ) -> dict[str, object]:
        """Log a food and return the refreshed day."""
        state_container: AppContainer = request.app.state.container
        log = state_container.daily_log_service.add_entry(
            user_id, day, payload.food_name, payload.quantity, payload.unit
        )
        return _log_payload(log)

    @app.delete("/users/{user_id}/entries/{entry_id}")
    async def delete_entry(
        user_id: UUID, entry_id: UUID, request: Request
    ) -> dict[str, object]:
        """Remove a logged food and return the refreshed day."""
        state_container: AppContainer = request.app.state.container
        log = state_container.daily_log_service.delete_entry(user_id, entry_id)
        return _log_payload(log)

    @app.get("/users/{user_id}/progress/{year}/{month}")
    async def month_progress(
        user_id: UUID,
        year: Annotated[int, Path(ge=date.min.year, le=date.max.year)],
        month: Annotated[int, Path(ge=1, le=12)],
        request: Request,
    ) -> dict[str, object]:
        """Return compliance for each day of a month."""
        state_container: AppContainer = request.app.state.container
        summary = state_container.progress_service.month_summary(user_id, year, month)
        return asdict(summary)

    return app


def _targets_payload(container: AppContainer, user_id: UUID) -> dict[str, object]:
    targets = container.profile_service.get_targets(user_id)
    intake = container.profile_service.get_intake_estimate(user_id)
    return {"targets": asdict(targets), "intake": asdict(intake)}


def _log_payload(log: DailyLog) -> dict[str, object]:
    return {
        "day": log.day,
        "totals": asdict(log.totals),
        "missing_foods": log.missing_foods,
        "entries": [
            {
                "id": described.entry.id,
                "food_name": described.entry.food_name,
                "quantity": described.entry.quantity,
                "display_units": round(described.view.display_units, 1),
                "unit": described.view.unit,
                "food_found": described.food_found,
                **asdict(described.view.nutrients),
            }
            for described in log.entries
        ],
    }
