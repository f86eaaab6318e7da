"""Configuration contracts."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from modelsync.contracts.plan import UpdateMode


class ModelSyncConfig(BaseModel):
    source: str = "http"
    base_url: str = "http://localhost:3000"
    headers: dict[str, str] = Field(default_factory=dict)
    timeout: float = Field(default=30.0, gt=0)
    update_mode: UpdateMode = UpdateMode.FULL
    channels: list[int] = Field(default_factory=list)
    report_path: Path | None = None

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("base_url must not be empty")
        return value.rstrip("/")
