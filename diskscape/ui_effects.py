"""Transient visual state of the interface."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class UiEffects:
    flash_space_freed: bool = False
    current_path_is_red: bool = False
    deletion_in_progress: bool = False
    loading_progress_indicator: int = 0
    last_read_path: Path | None = None

    def increment_loading_progress_indicator(self) -> None:
        """Advance the scanning animation; the step sets its speed."""
        self.loading_progress_indicator += 3