"""
Тесты для Benchmark Harness

Проверяемые инварианты:
1. all_times содержит все timed_runs замеров в порядке запусков
2. Trim 10% с каждой стороны, mean / median / min / max по остатку
3. avg_time строго между min_time и max_time, если остаток не константа
4. Возвращается результат последнего запуска (с журналом)
5. Warm-up + timed запуски на независимых копиях
6. Валидация BenchmarkConfig
"""

import random
import statistics

import pytest

from debt_settlement.benchmark import BenchmarkConfig, run_benchmark, summarize_samples
from debt_settlement.strategies import Strategy01Greedy, Strategy03Sorting


NET = {"A": 40.0, "B": -25.0, "C": -35.0, "D": 20.0}


class SteppingClock:
    """Детерминированный timer: каждый замер длится следующее значение durations (сек)."""

    def __init__(self, durations):
        self._durations = iter(durations)
        self._now = 0.0
        self._running = False
        self.calls = 0

    def __call__(self) -> float:
        self.calls += 1
        if self._running:
            self._now += next(self._durations)
        self._running = not self._running
        return self._now


class RecordingGreedy(Strategy01Greedy):
    """Greedy, запоминающий каждую полученную рабочую копию."""

    def __init__(self):
        self.received = []

    def settle(self, working):
        self.received.append(working)
        return super().settle(working)


@pytest.fixture
def shuffled_durations():
    """1..50 ms в перемешанном порядке."""
    durations = [ms / 1000.0 for ms in range(1, 51)]
    random.Random(3).shuffle(durations)
    return durations


# =============================================================================
# CONFIG
# =============================================================================


class TestBenchmarkConfig:
    """Тесты BenchmarkConfig"""

    def test_defaults(self):
        config = BenchmarkConfig()
        assert config.warmup_runs == 5
        assert config.timed_runs == 50
        assert config.trim_fraction == 0.10
        assert config.trim_count == 5

    def test_trim_count_rounds_down(self):
        assert BenchmarkConfig(timed_runs=19).trim_count == 1
        assert BenchmarkConfig(timed_runs=9).trim_count == 0

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"warmup_runs": -1},
            {"timed_runs": 0},
            {"trim_fraction": 0.5},
            {"trim_fraction": -0.1},
        ],
    )
    def test_invalid_config(self, kwargs):
        with pytest.raises(ValueError):
            BenchmarkConfig(**kwargs)

    def test_frozen(self):
        with pytest.raises(Exception):
            BenchmarkConfig().timed_runs = 10


# =============================================================================
# STATISTICS
# =============================================================================


class TestSummarizeSamples:
    """Тесты trimmed-статистики"""

    def test_trimmed_statistics(self, shuffled_durations):
        samples = [d * 1000.0 for d in shuffled_durations]
        result = summarize_samples(samples, trim_count=5)

        assert result.all_times == tuple(samples)
        assert result.min_time == pytest.approx(6.0)
        assert result.max_time == pytest.approx(45.0)
        assert result.avg_time == pytest.approx(25.5)
        assert result.median_time == pytest.approx(25.5)

    def test_outliers_trimmed(self):
        samples = [1.0] * 45 + [1000.0] * 5
        result = summarize_samples(samples, trim_count=5)
        assert result.max_time == 1.0
        assert result.avg_time == 1.0

    def test_constant_samples(self):
        result = summarize_samples([2.0] * 50, trim_count=5)
        assert result.avg_time == result.min_time == result.max_time == result.median_time == 2.0

    def test_avg_strictly_inside_range(self):
        rng = random.Random(11)
        samples = [rng.uniform(0.1, 3.0) for _ in range(50)]
        result = summarize_samples(samples, trim_count=5)
        assert result.min_time < result.avg_time < result.max_time
        assert result.min_time <= result.median_time <= result.max_time

    def test_even_count_median_is_midpoint(self):
        result = summarize_samples([4.0, 1.0, 3.0, 2.0], trim_count=0)
        assert result.median_time == 2.5

    def test_overtrim_rejected(self):
        with pytest.raises(ValueError):
            summarize_samples([1.0, 2.0], trim_count=1)

    def test_payload_keys(self):
        payload = summarize_samples([1.0, 2.0, 3.0], trim_count=0).to_payload()
        assert set(payload) == {"avgTime", "medianTime", "minTime", "maxTime", "allTimes"}
        assert payload["allTimes"] == [1.0, 2.0, 3.0]


# =============================================================================
# HARNESS
# =============================================================================


class TestRunBenchmark:
    """Тесты run_benchmark"""

    def test_fifty_samples_with_fake_clock(self, shuffled_durations):
        clock = SteppingClock(shuffled_durations)
        run = run_benchmark(Strategy01Greedy(), NET, timer=clock)

        assert len(run.timing.all_times) == 50
        assert list(run.timing.all_times) == pytest.approx([d * 1000.0 for d in shuffled_durations])
        assert run.timing.avg_time == pytest.approx(25.5)
        assert run.timing.min_time == pytest.approx(6.0)
        assert run.timing.max_time == pytest.approx(45.0)
        # timer вызывается только вокруг timed запусков
        assert clock.calls == 100

    def test_returns_final_run_result(self):
        strategy = RecordingGreedy()
        run = run_benchmark(strategy, NET)

        assert run.result == Strategy01Greedy().run(NET)
        assert run.result.steps
        assert run.result.steps[1].parties == ("A", "B", "C", "D")

    def test_warmup_and_timed_invocations(self):
        strategy = RecordingGreedy()
        run_benchmark(strategy, NET, BenchmarkConfig(warmup_runs=5, timed_runs=50))
        assert len(strategy.received) == 55

    def test_each_invocation_gets_independent_copy(self):
        strategy = RecordingGreedy()
        run_benchmark(strategy, NET, BenchmarkConfig(warmup_runs=2, timed_runs=10))

        entry_ids = [id(entry) for working in strategy.received for entry in working]
        assert len(entry_ids) == len(set(entry_ids))
        assert NET == {"A": 40.0, "B": -25.0, "C": -35.0, "D": 20.0}

    def test_custom_config(self):
        run = run_benchmark(
            Strategy03Sorting(), NET, BenchmarkConfig(warmup_runs=0, timed_runs=10, trim_fraction=0.2)
        )
        assert len(run.timing.all_times) == 10
        trimmed = sorted(run.timing.all_times)[2:8]
        assert run.timing.min_time == trimmed[0]
        assert run.timing.max_time == trimmed[-1]
        assert run.timing.avg_time == pytest.approx(statistics.fmean(trimmed))

    def test_real_timer_non_negative(self):
        run = run_benchmark(Strategy01Greedy(), NET)
        assert all(t >= 0.0 for t in run.timing.all_times)
        assert run.timing.min_time <= run.timing.median_time <= run.timing.max_time

    def test_empty_balances(self):
        run = run_benchmark(Strategy01Greedy(), {})
        assert run.result.transactions == ()
        assert run.result.steps == ()
        assert len(run.timing.all_times) == 50
