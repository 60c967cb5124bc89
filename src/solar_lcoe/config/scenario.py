"""Top-level scenario — project inputs plus sensitivity settings, loadable from YAML."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from solar_lcoe.config.project import ProjectInputs
from solar_lcoe.config.sensitivity import SensitivityConfig


class Scenario(BaseModel):
    """Complete input bundle for one calculator session."""

    project: ProjectInputs = Field(default_factory=ProjectInputs)
    sensitivity: SensitivityConfig = Field(default_factory=SensitivityConfig)


def load_scenario(path: str | Path) -> Scenario:
    """Load and validate a scenario YAML file.

    Missing sections fall back to defaults; an empty file yields the
    default scenario.
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return Scenario(**data)
