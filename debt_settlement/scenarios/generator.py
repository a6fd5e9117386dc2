"""
Scenario Generator — случайные сценарии для демонстрации и сравнения стратегий

Генерация детерминирована при заданном seed (random.Random(seed)):
- участники выбираются из пула имён без повторов
- у каждого обязательства различные from / to
- суммы — целые значения в [min_amount, max_amount]
"""

import random
from dataclasses import dataclass
from typing import Final, Optional

from debt_settlement.core.domain.obligation import Obligation
from debt_settlement.core.domain.scenario import Scenario


DEFAULT_PARTY_POOL: Final[tuple[str, ...]] = (
    "Alice",
    "Bob",
    "Charlie",
    "Diana",
    "Eve",
    "Frank",
    "Grace",
    "Henry",
    "Ivy",
    "Jack",
    "Kate",
    "Leo",
)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ScenarioConfig:
    """Параметры генерации сценария."""

    party_count: int = 5
    obligation_count: int = 8
    min_amount: int = 10
    max_amount: int = 500
    party_pool: tuple[str, ...] = DEFAULT_PARTY_POOL

    def __post_init__(self):
        if self.party_count < 2:
            raise ValueError(f"party_count must be >= 2, got {self.party_count}")
        if self.party_count > len(self.party_pool):
            raise ValueError(
                f"party_count={self.party_count} exceeds party pool size {len(self.party_pool)}"
            )
        if len(set(self.party_pool)) != len(self.party_pool):
            raise ValueError("party_pool must not contain duplicates")
        if self.obligation_count < 0:
            raise ValueError(f"obligation_count must be non-negative, got {self.obligation_count}")
        if self.min_amount <= 0:
            raise ValueError(f"min_amount must be positive, got {self.min_amount}")
        if self.max_amount < self.min_amount:
            raise ValueError(
                f"max_amount={self.max_amount} must be >= min_amount={self.min_amount}"
            )


# =============================================================================
# GENERATOR
# =============================================================================


def generate_random_scenario(
    config: ScenarioConfig = ScenarioConfig(),
    seed: Optional[int] = None,
) -> Scenario:
    """
    Случайный сценарий.

    Args:
        config: Параметры генерации
        seed: Seed генератора (None → недетерминированно)

    Returns:
        Scenario с config.party_count участниками и config.obligation_count
        обязательствами
    """
    rng = random.Random(seed)
    parties = rng.sample(config.party_pool, config.party_count)

    obligations = []
    for _ in range(config.obligation_count):
        debtor = rng.choice(parties)
        creditor = rng.choice([p for p in parties if p != debtor])
        amount = float(rng.randint(config.min_amount, config.max_amount))
        obligations.append(Obligation(from_party=debtor, to_party=creditor, amount=amount))

    return Scenario(parties=tuple(parties), obligations=tuple(obligations))
