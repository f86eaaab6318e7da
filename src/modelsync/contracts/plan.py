"""Update plan contracts."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class UpdateMode(StrEnum):
    ADD_ONLY = "add_new"
    REMOVE_ONLY = "remove_invalid"
    FULL = "full_update"

    @property
    def adds(self) -> bool:
        return self in (UpdateMode.ADD_ONLY, UpdateMode.FULL)

    @property
    def removes(self) -> bool:
        return self in (UpdateMode.REMOVE_ONLY, UpdateMode.FULL)


class ModelAction(StrEnum):
    ADD = "add"
    REMOVE = "remove"


class OverrideState(StrEnum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class ModelPlan(BaseModel):
    to_add: list[str] = Field(default_factory=list)
    to_remove: list[str] = Field(default_factory=list)

    def models_for(self, action: ModelAction) -> list[str]:
        return self.to_add if action is ModelAction.ADD else self.to_remove

    @property
    def is_empty(self) -> bool:
        return not self.to_add and not self.to_remove


class IncompatibleMapping(BaseModel):
    alias: str
    target: str
    alias_available: bool = False
