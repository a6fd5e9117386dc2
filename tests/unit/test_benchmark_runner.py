"""
Тесты для BenchmarkRunner

Coverage:
- Future возвращает SettlementReport
- Обработчик вызывается только для последнего запроса (superseded)
- cancel_superseded отменяет ещё не начатые запросы
- Запросы выполняются строго по очереди
"""

import threading

import pytest

from debt_settlement.benchmark import BenchmarkConfig
from debt_settlement.core.domain import Obligation
from debt_settlement.engine import BenchmarkRunner, SettlementEngine, SettlementReport


PARTIES = ("A", "B", "C")
OBLIGATIONS = (
    Obligation(from_party="A", to_party="B", amount=100.0),
    Obligation(from_party="B", to_party="C", amount=100.0),
)


class BlockingEngine(SettlementEngine):
    """Engine, первый запрос которого ждёт сигнала release."""

    def __init__(self):
        super().__init__(BenchmarkConfig(warmup_runs=0, timed_runs=5))
        self.started = threading.Event()
        self.release = threading.Event()
        self.calls = []
        self._first = True

    def settle(self, parties, obligations, strategy="greedy"):
        self.calls.append(strategy)
        if self._first:
            self._first = False
            self.started.set()
            assert self.release.wait(timeout=10)
        return super().settle(parties, obligations, strategy)


@pytest.fixture
def engine():
    return SettlementEngine(BenchmarkConfig(warmup_runs=0, timed_runs=5))


class TestBenchmarkRunner:
    """Тесты асинхронного runner"""

    def test_future_result(self, engine):
        with BenchmarkRunner(engine) as runner:
            future = runner.submit(PARTIES, OBLIGATIONS, "heapBased")
            report = future.result(timeout=10)

        assert isinstance(report, SettlementReport)
        assert report.metrics.transaction_count == 1

    def test_handler_called_for_single_request(self, engine):
        done = threading.Event()
        received = []

        def handler(future):
            received.append(future.result())
            done.set()

        with BenchmarkRunner(engine) as runner:
            runner.submit(PARTIES, OBLIGATIONS, on_complete=handler)
            assert done.wait(timeout=10)

        assert len(received) == 1

    def test_superseded_handler_skipped(self):
        engine = BlockingEngine()
        received = []

        with BenchmarkRunner(engine) as runner:
            first = runner.submit(PARTIES, OBLIGATIONS, "greedy", on_complete=lambda f: received.append("first"))
            assert engine.started.wait(timeout=10)
            second = runner.submit(PARTIES, OBLIGATIONS, "sorting", on_complete=lambda f: received.append("second"))
            engine.release.set()

            first.result(timeout=10)
            second.result(timeout=10)

        assert received == ["second"]
        # Вытесненный запрос всё равно выполняется до конца
        assert engine.calls == ["greedy", "sorting"]

    def test_cancel_superseded_pending_request(self):
        engine = BlockingEngine()

        with BenchmarkRunner(engine, cancel_superseded=True) as runner:
            running = runner.submit(PARTIES, OBLIGATIONS, "greedy")
            assert engine.started.wait(timeout=10)
            pending = runner.submit(PARTIES, OBLIGATIONS, "sorting")
            latest = runner.submit(PARTIES, OBLIGATIONS, "minCashFlow")
            engine.release.set()

            assert running.result(timeout=10).metrics.transaction_count == 1
            assert latest.result(timeout=10).metrics.transaction_count == 1

        assert pending.cancelled()
        assert engine.calls == ["greedy", "minCashFlow"]

    def test_is_current(self, engine):
        with BenchmarkRunner(engine) as runner:
            runner.submit(PARTIES, OBLIGATIONS).result(timeout=10)
            assert runner.is_current(1)
            runner.submit(PARTIES, OBLIGATIONS).result(timeout=10)
            assert not runner.is_current(1)
            assert runner.is_current(2)

    def test_submit_after_shutdown(self, engine):
        runner = BenchmarkRunner(engine)
        runner.shutdown()
        with pytest.raises(RuntimeError):
            runner.submit(PARTIES, OBLIGATIONS)

    def test_rejected_submit_keeps_queued_request(self):
        """Запрос, отклонённый после shutdown, не отменяет и не вытесняет уже поданный"""
        engine = BlockingEngine()
        runner = BenchmarkRunner(engine, cancel_superseded=True)
        done = threading.Event()
        received = []

        def handler(future):
            received.append(future.result().strategy.value)
            done.set()

        try:
            runner.submit(PARTIES, OBLIGATIONS, "greedy")
            assert engine.started.wait(timeout=10)
            queued = runner.submit(PARTIES, OBLIGATIONS, "sorting", on_complete=handler)

            runner.shutdown(wait=False)
            with pytest.raises(RuntimeError):
                runner.submit(PARTIES, OBLIGATIONS, "minCashFlow")

            assert not queued.cancelled()
            assert runner.is_current(2)

            engine.release.set()
            assert queued.result(timeout=10).metrics.transaction_count == 1
            assert done.wait(timeout=10)
        finally:
            engine.release.set()
            runner.shutdown(wait=True)

        assert received == ["sorting"]
        assert engine.calls == ["greedy", "sorting"]
