"""Scenarios — генерация случайных сценариев."""

from .generator import DEFAULT_PARTY_POOL, ScenarioConfig, generate_random_scenario

__all__ = [
    "DEFAULT_PARTY_POOL",
    "ScenarioConfig",
    "generate_random_scenario",
]
