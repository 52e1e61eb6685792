"""Supabase-backed diet plan repository."""

from dataclasses import dataclass

from postgrest.exceptions import APIError
from supabase import Client

from levelup_ai.domain.diet import DietPlan
from levelup_ai.domain.errors import StoreError
from levelup_ai.services.diets import DietPlanRepository

_STORE_MANAGED = {"id", "created_at"}


@dataclass
class SupabaseDietPlanRepository(DietPlanRepository):
    """Supabase implementation for diet plan persistence.

    Plans without an id are inserted and receive a store-assigned id. Plans
    with an id overwrite the existing row in place.
    """

    client: Client
    table: str = "diet_plans"

    def get_plan(self, plan_id: str) -> DietPlan | None:
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

    def save_plan(self, plan: DietPlan) -> DietPlan:
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
            raise StoreError("Failed to save diet plan in Supabase")
        return _parse_plan(response.data[0])


def _parse_plan(row: dict[str, object]) -> DietPlan:
    """Parse a diet plan row into a domain model."""
    return DietPlan.model_validate(
        {
            **row,
            "id": str(row["id"]),
            "restrictions": row.get("restrictions") or [],
            "meals": row.get("meals") or [],
            "target_macros": row.get("target_macros") or {},
        }
    )
