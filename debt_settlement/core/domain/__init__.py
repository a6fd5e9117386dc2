"""
Domain models and value objects.

Contains fundamental domain entities like Obligation, SettlementTransaction,
TraceStep and Scenario.
"""

from debt_settlement.core.domain.obligation import Obligation, Party, SettlementTransaction
from debt_settlement.core.domain.scenario import Scenario, SettlementRequest, StrategyName
from debt_settlement.core.domain.trace import (
    ConsiderStep,
    InfoStep,
    SelectStep,
    TraceRecorder,
    TraceStep,
    TransactionStep,
    trace_from_payload,
    trace_to_payload,
    transactions_from_trace,
)

__all__ = [
    # Obligation module
    "Party",
    "Obligation",
    "SettlementTransaction",
    # Scenario module
    "Scenario",
    "SettlementRequest",
    "StrategyName",
    # Trace module
    "TraceStep",
    "InfoStep",
    "ConsiderStep",
    "SelectStep",
    "TransactionStep",
    "TraceRecorder",
    "transactions_from_trace",
    "trace_to_payload",
    "trace_from_payload",
]
