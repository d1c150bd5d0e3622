"""Pydantic models passed between the scaffolding stages."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from .registry import TEMPLATES


class ScaffoldRequest(BaseModel):
    """The operator's answers for one invocation."""

    project_name: str = Field(..., min_length=1)
    template_key: str

    @field_validator("template_key")
    @classmethod
    def _known_template(cls, value: str) -> str:
        if value not in TEMPLATES:
            raise ValueError(
                f"unknown template {value!r}; expected one of {', '.join(TEMPLATES)}"
            )
        return value


class ScaffoldResult(BaseModel):
    """What a successful run produced."""

    project_name: str
    template_key: str
    target_dir: Path
    installed: bool = False
