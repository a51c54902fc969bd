"""Daily food log service."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from recomp_tracker.domain.errors import EntryNotFoundError, InvalidUnitError
from recomp_tracker.domain.foods import FoodUnit
from recomp_tracker.domain.logs import (
    DailyLog,
    DailyTotals,
    DailyTotalsRow,
    DescribedEntry,
    EntryView,
    LogEntry,
)
from recomp_tracker.services.aggregation import NutrientAggregator, round_totals
from recomp_tracker.services.catalog import FoodCatalog, FoodCatalogService

_logger = logging.getLogger(__name__)


class DailyLogRepository(Protocol):
    """Persistence interface for log entries and cached daily totals."""

    def list_entries(self, user_id: UUID, day: date) -> list[LogEntry]:
        """Return the entries logged on a day, oldest first."""

    def get_entry(self, user_id: UUID, entry_id: UUID) -> LogEntry | None:
        """Return an entry by id if it belongs to the user."""

    def add_entry(
        self, user_id: UUID, day: date, food_name: str, quantity: float
    ) -> LogEntry:
        """Store an entry and return it."""

    def delete_entry(self, entry_id: UUID) -> None:
        """Remove an entry."""

    def get_totals(self, user_id: UUID, day: date) -> DailyTotals | None:
        """Return the cached totals for a day, if any."""

    def save_totals(self, user_id: UUID, day: date, totals: DailyTotals) -> None:
        """Create or replace the cached totals for a day."""

    def list_totals(self, user_id: UUID) -> list[DailyTotalsRow]:
        """Return cached totals for every logged day, newest first."""


@dataclass
class DailyLogService:
    """Adds and removes entries and keeps the cached daily totals current."""

    catalog_service: FoodCatalogService
    aggregator: NutrientAggregator
    repository: DailyLogRepository

    def add_entry(  # noqa: PLR0913
        self,
        user_id: UUID,
        day: date,
        food_name: str,
        quantity: float,
        unit: FoodUnit | None = None,
    ) -> DailyLog:
        """Log a quantity of a food in the unit the user entered."""
        catalog = self.catalog_service.catalog_for(user_id)
        food = catalog.require(food_name)
        if not self.aggregator.converter.accepts_unit(food, unit):
            raise InvalidUnitError(food.name, str(unit))
        stored = self.aggregator.converter.to_stored_quantity(food, quantity, unit)
        entry = self.repository.add_entry(user_id, day, food.name, stored)
        _logger.info(
            "Log entry added: user_id=%s day=%s food=%s quantity=%s",
            user_id,
            day,
            food.name,
            stored,
        )
        return self._recompute(user_id, entry.day, catalog, save=True)

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> DailyLog:
        """Remove an entry and refresh its day."""
        entry = self.repository.get_entry(user_id, entry_id)
        if entry is None:
            raise EntryNotFoundError(entry_id)
        self.repository.delete_entry(entry_id)
        _logger.info("Log entry removed: user_id=%s entry_id=%s", user_id, entry_id)
        catalog = self.catalog_service.catalog_for(user_id)
        return self._recompute(user_id, entry.day, catalog, save=True)

    def get_daily_log(self, user_id: UUID, day: date) -> DailyLog:
        """Return a day's entries and totals, refreshing the cached totals."""
        catalog = self.catalog_service.catalog_for(user_id)
        return self._recompute(user_id, day, catalog, save=False)

    def list_daily_totals(self, user_id: UUID) -> list[DailyTotalsRow]:
        """Return cached totals for calendar and progress views."""
        return self.repository.list_totals(user_id)

    def _recompute(
        self, user_id: UUID, day: date, catalog: FoodCatalog, *, save: bool
    ) -> DailyLog:
        entries = self.repository.list_entries(user_id, day)
        result = self.aggregator.aggregate_log(entries, catalog.foods)
        totals = round_totals(result.totals)
        # Untouched days stay uncached so they read as having no data.
        if save or entries or self.repository.get_totals(user_id, day) is not None:
            self.repository.save_totals(user_id, day, totals)
        return DailyLog(
            day=day,
            entries=[self._describe(entry, catalog) for entry in entries],
            totals=totals,
            missing_foods=result.missing_foods,
        )

    def _describe(self, entry: LogEntry, catalog: FoodCatalog) -> DescribedEntry:
        food = catalog.get(entry.food_name)
        if food is None:
            return DescribedEntry(
                entry=entry,
                view=EntryView(
                    display_units=entry.quantity,
                    unit=FoodUnit.GRAM,
                    nutrients=DailyTotals(),
                ),
                food_found=False,
            )
        return DescribedEntry(
            entry=entry,
            view=self.aggregator.converter.describe(food, entry.quantity),
        )
