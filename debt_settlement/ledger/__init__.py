"""Ledger — net-балансы участников и рабочие копии для стратегий."""

from .net_balances import (
    NetBalance,
    WorkingBalance,
    balance_total,
    compute_net_balances,
    fork_working_balances,
    is_balanced,
    replay_transactions,
    unsettled_parties,
)

__all__ = [
    "NetBalance",
    "WorkingBalance",
    "balance_total",
    "compute_net_balances",
    "fork_working_balances",
    "is_balanced",
    "replay_transactions",
    "unsettled_parties",
]
