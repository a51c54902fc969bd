"""Supabase repository for log entries and cached daily totals."""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from uuid import UUID

from supabase import Client

from recomp_tracker.domain.logs import DailyTotals, DailyTotalsRow, LogEntry
from recomp_tracker.services.daily_logs import DailyLogRepository


@dataclass
class SupabaseDailyLogRepository(DailyLogRepository):
    """Supabase implementation for daily logs."""

    client: Client

    def list_entries(self, user_id: UUID, day: date) -> list[LogEntry]:
        """Return entries for a day in insertion order."""
        response = (
            self.client.table("log_entries")
            .select("id, user_id, date, food_name, quantity")
            .eq("user_id", str(user_id))
            .eq("date", day.isoformat())
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]

    def get_entry(self, user_id: UUID, entry_id: UUID) -> LogEntry | None:
        """Return an entry by id for the user."""
        response = (
            self.client.table("log_entries")
            .select("id, user_id, date, food_name, quantity")
            .eq("id", str(entry_id))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_entry(response.data[0])

    def add_entry(
        self, user_id: UUID, day: date, food_name: str, quantity: float
    ) -> LogEntry:
        """Insert an entry row."""
        response = (
            self.client.table("log_entries")
            .insert(
                {
                    "user_id": str(user_id),
                    "date": day.isoformat(),
                    "food_name": food_name,
                    "quantity": quantity,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create log entry")
        return _parse_entry(response.data[0])

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete an entry row."""
        self.client.table("log_entries").delete().eq("id", str(entry_id)).execute()

    def get_totals(self, user_id: UUID, day: date) -> DailyTotals | None:
        """Return cached totals for a day."""
        response = (
            self.client.table("daily_logs")
            .select("date, total_calories, total_protein, total_carbs, total_fats")
            .eq("user_id", str(user_id))
            .eq("date", day.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_totals(response.data[0])

    def save_totals(self, user_id: UUID, day: date, totals: DailyTotals) -> None:
        """Upsert cached totals for a day."""
        self.client.table("daily_logs").upsert(
            {
                "user_id": str(user_id),
                "date": day.isoformat(),
                "total_calories": totals.calories,
                "total_protein": totals.protein_g,
                "total_carbs": totals.carbs_g,
                "total_fats": totals.fats_g,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="user_id,date",
        ).execute()

    def list_totals(self, user_id: UUID) -> list[DailyTotalsRow]:
        """Return cached totals for all days, newest first."""
        response = (
            self.client.table("daily_logs")
            .select("date, total_calories, total_protein, total_carbs, total_fats")
            .eq("user_id", str(user_id))
            .order("date", desc=True)
            .execute()
        )
        return [
            DailyTotalsRow(
                day=date.fromisoformat(str(row["date"])[:10]),
                totals=_parse_totals(row),
            )
            for row in response.data or []
        ]


def _parse_entry(row: dict[str, object]) -> LogEntry:
    return LogEntry(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        day=date.fromisoformat(str(row["date"])[:10]),
        food_name=str(row["food_name"]),
        quantity=float(row.get("quantity", 0.0)),
    )


def _parse_totals(row: dict[str, object]) -> DailyTotals | None:
    if row.get("total_calories") is None:
        return None
    return DailyTotals(
        calories=float(row["total_calories"]),
        protein_g=float(row.get("total_protein") or 0.0),
        carbs_g=float(row.get("total_carbs") or 0.0),
        fats_g=float(row.get("total_fats") or 0.0),
    )
