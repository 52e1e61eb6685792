"""Supabase-backed workout plan repository."""

from dataclasses import dataclass

from postgrest.exceptions import APIError
from supabase import Client

from levelup_ai.domain.errors import StoreError
from levelup_ai.domain.workout import WorkoutPlan
from levelup_ai.services.workouts import WorkoutPlanRepository

_STORE_MANAGED = {"id", "created_at"}


@dataclass
class SupabaseWorkoutPlanRepository(WorkoutPlanRepository):
    """Supabase implementation for workout plan persistence."""

    client: Client
    table: str = "workout_plans"

    def get_plan(self, plan_id: str) -> WorkoutPlan | None:
        """Return the plan for an id, if present."""
        try:
            response = (
                self.client.table(self.table)
                .select("*")
                .eq("id", plan_id)
                .limit(1)
                .execute()
            )
        except APIError as exc:
            raise StoreError(exc.message or str(exc)) from exc
        if not response.data:
            return None
        return _parse_plan(response.data[0])

    def save_plan(self, plan: WorkoutPlan) -> WorkoutPlan:
        """Insert a new plan or overwrite an existing one."""
        payload = plan.model_dump(mode="json", exclude=_STORE_MANAGED)
        try:
            if plan.id is None:
                response = self.client.table(self.table).insert(payload).execute()
            else:
                response = (
                    self.client.table(self.table)
                    .update(payload)
                    .eq("id", plan.id)
                    .execute()
                )
        except APIError as exc:
            raise StoreError(exc.message or str(exc)) from exc
        if not response.data:
            raise StoreError("Failed to save workout plan in Supabase")
        return _parse_plan(response.data[0])


def _parse_plan(row: dict[str, object]) -> WorkoutPlan:
    """Parse a workout plan row into a domain model."""
    return WorkoutPlan.model_validate(
        {**row, "id": str(row["id"]), "exercises": row.get("exercises") or []}
    )
