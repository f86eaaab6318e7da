"""Per-channel review overrides for plan entries."""

from __future__ import annotations

import copy
from collections.abc import Iterable

from modelsync.contracts.exceptions import ReviewError
from modelsync.contracts.plan import ModelAction, ModelPlan, OverrideState


class PlanOverrideStore:
    """Operator vetoes keyed by channel, action and model.

    A model without an entry is active.
    """

    def __init__(self, *, frozen: bool = False) -> None:
        self._entries: dict[int, dict[ModelAction, dict[str, OverrideState]]] = {}
        self._frozen = frozen

    @property
    def frozen(self) -> bool:
        return self._frozen

    def initialize(self, channel_id: int, plan: ModelPlan) -> None:
        self._check_mutable()
        self._entries[channel_id] = {
            ModelAction.ADD: {model: OverrideState.ACTIVE for model in plan.to_add},
            ModelAction.REMOVE: {model: OverrideState.ACTIVE for model in plan.to_remove},
        }

    def state(self, channel_id: int, action: ModelAction, model: str) -> OverrideState:
        return self._entries.get(channel_id, {}).get(action, {}).get(model, OverrideState.ACTIVE)

    def is_active(self, channel_id: int, action: ModelAction, model: str) -> bool:
        return self.state(channel_id, action, model) is OverrideState.ACTIVE

    def set_state(self, channel_id: int, action: ModelAction, model: str, state: OverrideState) -> None:
        self._check_mutable()
        by_action = self._entries.setdefault(channel_id, {})
        by_action.setdefault(action, {})[model] = state

    def toggle(self, channel_id: int, action: ModelAction, model: str) -> OverrideState:
        current = self.state(channel_id, action, model)
        new_state = OverrideState.INACTIVE if current is OverrideState.ACTIVE else OverrideState.ACTIVE
        self.set_state(channel_id, action, model, new_state)
        return new_state

    def active(self, channel_id: int, action: ModelAction, models: Iterable[str]) -> list[str]:
        return [model for model in models if self.is_active(channel_id, action, model)]

    def snapshot(self) -> PlanOverrideStore:
        """Return a read-only copy of the current overrides."""
        frozen = PlanOverrideStore(frozen=True)
        frozen._entries = copy.deepcopy(self._entries)
        return frozen

    def _check_mutable(self) -> None:
        if self._frozen:
            raise ReviewError("Plan overrides are read-only once execution has started")
