"""Configuration models for RepeatRule CLI."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from repeatrule_cli.recurrence.preview import MAX_PREVIEW


class OutputConfig(BaseModel):
    """Output configuration."""

    format: Literal["pretty", "json", "yaml", "table"] = Field(default="pretty")
    color: bool = Field(default=True)


class PreviewConfig(BaseModel):
    """Occurrence preview configuration."""

    limit: int = Field(default=10, ge=1, le=MAX_PREVIEW)


class EditorConfig(BaseModel):
    """Rule building configuration."""

    apply_fallback: bool = Field(
        default=True,
        description="Fill empty selections from --start when encoding",
    )


class AppConfig(BaseModel):
    """Main RepeatRule configuration"""

    output: OutputConfig = Field(default_factory=OutputConfig)
    preview: PreviewConfig = Field(default_factory=PreviewConfig)
    editor: EditorConfig = Field(default_factory=EditorConfig)
