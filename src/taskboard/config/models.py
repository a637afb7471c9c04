"""Pydantic models for configuration sub-sections."""

from __future__ import annotations

from pydantic import BaseModel, Field

from taskboard.config.constants import (
    ENTRY_TRANSITION_SECONDS,
    EXIT_TRANSITION_SECONDS,
)


class TransitionConfig(BaseModel):
    """How long cards stay in their entering/exiting state."""

    entry_seconds: float = Field(default=ENTRY_TRANSITION_SECONDS, ge=0)
    exit_seconds: float = Field(default=EXIT_TRANSITION_SECONDS, ge=0)


class AppearanceConfig(BaseModel):
    """Presentation settings. Read by the TUI only; the board core ignores them."""

    dark_mode: bool = False
