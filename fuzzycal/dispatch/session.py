"""
Session — Debounce событий выделения текста

Редактор присылает выделения часто (протягивание мышью, клавиатура).
SelectionSession:
- очищает результат для пустого или неподходящего выделения
- откладывает вычисление на debounce_delay_sec через Debouncer
- новое выделение отменяет отложенное вычисление ("latest selection wins")
- перед вычислением проверяет, что выделение не изменилось
- не показывает повторно то же самое выражение

Sink — любой объект с методами:
    show(text: str, items: list[ResultItem]) -> None
    clear() -> None
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Optional

from fuzzycal.core.errors import FuzzyCalError
from fuzzycal.dispatch.classifier import InputKind, SelectionClassifier

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class SelectionConfig:
    """Конфигурация SelectionSession."""

    # Задержка перед вычислением (секунды)
    debounce_delay_sec: float = 0.25


# =============================================================================
# DEBOUNCER
# =============================================================================


class Debouncer:
    """
    Отложенный запуск одной функции с отменой предыдущего запуска.

    Каждый schedule() отменяет ещё не сработавший таймер. Таймер, который
    уже начал срабатывать, проверяет поколение и не запускает устаревшую
    функцию.
    """

    def __init__(
        self,
        delay_sec: float,
        timer_factory: Callable[..., threading.Timer] = threading.Timer,
    ):
        if delay_sec < 0:
            raise ValueError(f"delay_sec must be non-negative, got {delay_sec}")

        self.delay_sec = delay_sec
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._pending: Optional[Callable[[], Any]] = None
        self._generation = 0

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._pending is not None

    def schedule(self, fn: Callable[[], Any]) -> None:
        """Отмена предыдущего запуска и планирование fn через delay_sec."""
        with self._lock:
            self._cancel_locked()
            self._generation += 1
            self._pending = fn
            timer = self._timer_factory(self.delay_sec, self._fire, args=(self._generation,))
            timer.daemon = True
            self._timer = timer
        timer.start()

    def cancel(self) -> None:
        """Отмена отложенного запуска (если есть)."""
        with self._lock:
            self._cancel_locked()

    def flush(self) -> None:
        """Немедленный синхронный запуск отложенной функции (если есть)."""
        with self._lock:
            fn = self._pending
            self._cancel_locked()
        if fn is not None:
            fn()

    def _cancel_locked(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
        self._timer = None
        self._pending = None
        self._generation += 1

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
            fn = self._pending
            self._timer = None
            self._pending = None
        if fn is not None:
            fn()


# =============================================================================
# SESSION
# =============================================================================


class SelectionSession:
    """
    Обработчик событий выделения: классификация, debounce, вывод в sink.

    Всё изменяемое состояние (текущее выделение, последний показанный
    текст) принадлежит экземпляру сессии.
    """

    def __init__(
        self,
        sink: Any,
        classifier: SelectionClassifier | None = None,
        config: SelectionConfig | None = None,
        debouncer: Debouncer | None = None,
    ):
        self.sink = sink
        self.classifier = classifier or SelectionClassifier()
        self.config = config or SelectionConfig()
        self.debouncer = debouncer or Debouncer(self.config.debounce_delay_sec)

        self._lock = threading.Lock()
        self._current_text = ""
        self._last_shown_text = ""

    @property
    def last_shown_text(self) -> str:
        with self._lock:
            return self._last_shown_text

    def on_selection(self, text: str) -> None:
        """
        Новое выделение в редакторе.

        Args:
            text: Выделенный текст (может быть пустым)
        """
        s = text.strip() if text else ""
        with self._lock:
            self._current_text = s
            if not s:
                self._last_shown_text = ""
            repeated = s == self._last_shown_text

        if not s:
            self.debouncer.cancel()
            self.sink.clear()
            return

        classification = self.classifier.classify(s)
        if classification.kind == InputKind.IGNORED:
            self.debouncer.cancel()
            self.sink.clear()
            return

        if classification.kind == InputKind.EXPRESSION and repeated:
            return

        kind = classification.kind
        self.debouncer.schedule(lambda: self._run(s, kind))

    def _run(self, text: str, kind: InputKind) -> None:
        with self._lock:
            if text != self._current_text:
                logger.debug("Selection changed before %r was evaluated", text)
                return

        try:
            items = self.classifier.run(kind, text)
        except FuzzyCalError as exc:
            logger.debug("Selection %r not shown: %s", text, exc)
            self.sink.clear()
            return

        with self._lock:
            self._last_shown_text = text
        self.sink.show(text, items)
