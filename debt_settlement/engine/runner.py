"""
BenchmarkRunner — асинхронный запуск engine вне интерактивного потока

Запрос = одна задача в однопоточном executor и один Future с результатом
(SettlementReport). Частичных результатов нет; начатый запрос не отменяется.

Конкурентные запросы:
- выполняются строго по очереди (max_workers=1)
- обработчик on_complete вызывается только для последнего поданного
  запроса; обработчики более ранних запросов вытесняются (superseded)
- при cancel_superseded=True ещё не начатые ранние запросы отменяются

Каждый запрос работает со своей копией балансов: общего изменяемого
состояния между запросами нет, lock защищает только счётчик поколений.
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Optional, Sequence, Union

from debt_settlement.core.domain.obligation import Obligation, Party
from debt_settlement.core.domain.scenario import StrategyName

from .engine import SettlementEngine

logger = logging.getLogger(__name__)


CompletionHandler = Callable[[Future], None]


class BenchmarkRunner:
    """Очередь benchmark-запросов с single-result Future."""

    def __init__(
        self,
        engine: Optional[SettlementEngine] = None,
        cancel_superseded: bool = False,
    ):
        """
        Args:
            engine: SettlementEngine (default: конфигурация по умолчанию)
            cancel_superseded: отменять ещё не начатые более ранние запросы
        """
        self.engine = engine or SettlementEngine()
        self.cancel_superseded = cancel_superseded
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="settlement-benchmark")
        self._lock = threading.Lock()
        self._generation = 0
        self._latest: Optional[Future] = None

    def submit(
        self,
        parties: Sequence[Party],
        obligations: Sequence[Obligation],
        strategy: Union[StrategyName, str] = StrategyName.GREEDY,
        on_complete: Optional[CompletionHandler] = None,
    ) -> Future:
        """
        Постановка запроса в очередь.

        Args:
            parties: участники
            obligations: обязательства
            strategy: идентификатор стратегии
            on_complete: обработчик завершения (получает Future); вызывается,
                только если после этого запроса не был подан более новый

        Returns:
            Future[SettlementReport]

        Raises:
            RuntimeError: Если runner уже остановлен (shutdown); состояние
                ранее поданных запросов не меняется
        """
        with self._lock:
            # Отклонённый executor запрос не вытесняет предыдущий
            future = self._executor.submit(
                self.engine.settle, tuple(parties), tuple(obligations), strategy
            )

            self._generation += 1
            generation = self._generation
            previous = self._latest
            self._latest = future

            if self.cancel_superseded and previous is not None and previous.cancel():
                logger.debug("cancelled superseded benchmark request before start")

        if on_complete is not None:
            future.add_done_callback(
                lambda done: self._dispatch(done, generation, on_complete)
            )
        return future

    def is_current(self, generation: int) -> bool:
        with self._lock:
            return generation == self._generation

    def _dispatch(self, future: Future, generation: int, handler: CompletionHandler) -> None:
        if future.cancelled():
            return
        if not self.is_current(generation):
            logger.debug("benchmark request %d superseded; handler skipped", generation)
            return
        handler(future)

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "BenchmarkRunner":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown(wait=True)
