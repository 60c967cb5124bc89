"""Configuration models — project inputs, sensitivity settings, constants."""

from solar_lcoe.config.project import ProjectInputs
from solar_lcoe.config.sensitivity import SensitivityConfig
from solar_lcoe.config.scenario import Scenario, load_scenario

__all__ = [
    "ProjectInputs",
    "SensitivityConfig",
    "Scenario",
    "load_scenario",
]
