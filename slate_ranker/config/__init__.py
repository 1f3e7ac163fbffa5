"""Configuration for projections and runtime settings."""

from .projection_config import (
    CONFIDENCE_CONFIG,
    FORM_CONFIG,
    SIMULATION_CONFIG,
    VOLATILITY_CONFIG,
    ConfidenceConfig,
    FormConfig,
    SimulationConfig,
    VolatilityConfig,
)
from .settings import Settings, load_settings

__all__ = [
    'CONFIDENCE_CONFIG',
    'FORM_CONFIG',
    'SIMULATION_CONFIG',
    'VOLATILITY_CONFIG',
    'ConfidenceConfig',
    'FormConfig',
    'SimulationConfig',
    'VolatilityConfig',
    'Settings',
    'load_settings'
]
