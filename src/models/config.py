"""Configuration models for capture suites."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

_WINDOW_SIZE_RE = re.compile(r"^\d+x\d+$")


class BrowserConfig(BaseModel):
    desired_capabilities: dict = Field(default_factory=dict)
    window_size: Optional[str] = None  # e.g. "1280x720"

    @field_validator("window_size")
    @classmethod
    def check_window_size(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not _WINDOW_SIZE_RE.match(v):
            raise ValueError(f"window_size must look like WIDTHxHEIGHT, got '{v}'")
        return v


class ProjectConfig(BaseModel):
    # Target
    root_url: str = ""

    # Comparison
    tolerance: float = 2.3

    # Browsers, keyed by browser id
    browsers: dict[str, BrowserConfig] = Field(
        default_factory=lambda: {
            "chrome": BrowserConfig(desired_capabilities={"browserName": "chrome"}),
            "firefox": BrowserConfig(desired_capabilities={"browserName": "firefox"}),
        }
    )

    # Where suite definition files live
    suite_paths: list[str] = Field(default_factory=lambda: ["qa-suites"])

    @property
    def browser_ids(self) -> list[str]:
        return list(self.browsers)

    @classmethod
    def load(cls, path: str | Path) -> "ProjectConfig":
        """Load config from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path) as f:
            data = json.load(f)
        return cls(**data)

    def save(self, path: str | Path) -> None:
        """Save config to a JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.model_dump(), f, indent=2)
