"""Channel snapshot contract."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


def split_models(value: str) -> list[str]:
    """Split the comma-joined external representation into identifiers."""
    return [part.strip() for part in value.split(",") if part.strip()]


def join_models(models: list[str]) -> str:
    return ",".join(models)


class Channel(BaseModel):
    id: int
    name: str = ""
    models: list[str] = Field(default_factory=list)
    model_mapping: str | None = None

    @field_validator("models", mode="before")
    @classmethod
    def _parse_models(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            value = split_models(value)
        if isinstance(value, list):
            seen: set[str] = set()
            ordered: list[str] = []
            for model in value:
                name = model.strip() if isinstance(model, str) else model
                if name == "" or name in seen:
                    continue
                seen.add(name)
                ordered.append(name)
            return ordered
        return value

    @field_validator("model_mapping", mode="before")
    @classmethod
    def _blank_mapping(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def display_name(self) -> str:
        return self.name or f"#{self.id}"
