"""Тесты для Debouncer и SelectionSession

Покрытие:
- Debouncer: отмена предыдущего таймера, cancel, flush, устаревшие таймеры
- SelectionSession: очистка, latest selection wins, подавление повторов,
  ошибки конвейера → clear
"""

import threading

import pytest

from fuzzycal.dispatch import Debouncer, SelectionConfig, SelectionSession


# =============================================================================
# FAKES
# =============================================================================


class ManualTimer:
    """Таймер, который срабатывает только по вызову fire()."""

    def __init__(self, interval, function, args=None, kwargs=None):
        self.interval = interval
        self.function = function
        self.args = args or ()
        self.daemon = False
        self.started = False
        self.cancelled = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        self.function(*self.args)


class TimerFactory:
    def __init__(self):
        self.timers = []

    def __call__(self, interval, function, args=None, kwargs=None):
        timer = ManualTimer(interval, function, args, kwargs)
        self.timers.append(timer)
        return timer


class RecordingSink:
    def __init__(self):
        self.shown = []
        self.clear_count = 0

    def show(self, text, items):
        self.shown.append((text, items))

    def clear(self):
        self.clear_count += 1


@pytest.fixture
def timers():
    return TimerFactory()


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def session(sink, timers):
    return SelectionSession(sink, debouncer=Debouncer(0.25, timer_factory=timers))


# =============================================================================
# DEBOUNCER
# =============================================================================


class TestDebouncer:
    """Отложенный запуск с отменой"""

    def test_fires_once(self, timers) -> None:
        calls = []
        debouncer = Debouncer(0.25, timer_factory=timers)
        debouncer.schedule(lambda: calls.append(1))

        assert debouncer.pending
        assert timers.timers[0].started
        assert timers.timers[0].daemon
        assert timers.timers[0].interval == 0.25

        timers.timers[0].fire()
        assert calls == [1]
        assert not debouncer.pending

    def test_reschedule_cancels_previous(self, timers) -> None:
        calls = []
        debouncer = Debouncer(0.25, timer_factory=timers)
        debouncer.schedule(lambda: calls.append("first"))
        debouncer.schedule(lambda: calls.append("second"))

        assert timers.timers[0].cancelled
        # Устаревший таймер, успевший сработать, ничего не запускает
        timers.timers[0].fire()
        assert calls == []

        timers.timers[1].fire()
        assert calls == ["second"]

    def test_cancel(self, timers) -> None:
        calls = []
        debouncer = Debouncer(0.25, timer_factory=timers)
        debouncer.schedule(lambda: calls.append(1))
        debouncer.cancel()

        assert not debouncer.pending
        assert timers.timers[0].cancelled
        timers.timers[0].fire()
        assert calls == []

    def test_flush_runs_immediately(self, timers) -> None:
        calls = []
        debouncer = Debouncer(0.25, timer_factory=timers)
        debouncer.schedule(lambda: calls.append(1))
        debouncer.flush()

        assert calls == [1]
        assert timers.timers[0].cancelled
        debouncer.flush()
        assert calls == [1]

    def test_negative_delay_rejected(self) -> None:
        with pytest.raises(ValueError, match="delay_sec must be non-negative"):
            Debouncer(-1.0)

    def test_real_timer(self) -> None:
        fired = threading.Event()
        debouncer = Debouncer(0.01)
        debouncer.schedule(fired.set)
        assert fired.wait(timeout=5.0)


# =============================================================================
# SESSION
# =============================================================================


class TestSelectionSession:
    """События выделения"""

    def test_expression_shown_after_debounce(self, session, sink) -> None:
        session.on_selection("0xff + 42")
        assert sink.shown == []

        session.debouncer.flush()
        assert len(sink.shown) == 1
        text, items = sink.shown[0]
        assert text == "0xff + 42"
        assert items[0].label == "297"
        assert session.last_shown_text == "0xff + 42"

    def test_numeral_shown(self, session, sink) -> None:
        session.on_selection("  FF  ")
        session.debouncer.flush()
        text, items = sink.shown[0]
        assert text == "FF"
        assert items[0].label == "0xFF"

    def test_empty_selection_clears(self, session, sink) -> None:
        session.on_selection("1+1")
        session.debouncer.flush()
        session.on_selection("")

        assert sink.clear_count == 1
        assert session.last_shown_text == ""
        assert not session.debouncer.pending

    def test_ignored_selection_clears_and_cancels(self, session, sink, timers) -> None:
        session.on_selection("1+1")
        session.on_selection("foo")

        assert sink.clear_count == 1
        assert timers.timers[0].cancelled
        assert not session.debouncer.pending

    def test_latest_selection_wins(self, session, sink) -> None:
        session.on_selection("1+1")
        session.on_selection("2+2")
        session.debouncer.flush()

        assert [text for text, _ in sink.shown] == ["2+2"]

    def test_repeated_expression_not_rescheduled(self, session, sink) -> None:
        session.on_selection("1+1")
        session.debouncer.flush()
        session.on_selection("1+1")

        assert not session.debouncer.pending
        assert len(sink.shown) == 1

    def test_pipeline_failure_clears(self, session, sink) -> None:
        session.on_selection("8#9")
        session.debouncer.flush()

        assert sink.shown == []
        assert sink.clear_count == 1

    def test_default_config(self, sink) -> None:
        session = SelectionSession(sink)
        assert session.config == SelectionConfig()
        assert session.debouncer.delay_sec == 0.25

    def test_last_shown_text_read_under_lock(self, session) -> None:
        seen = []
        with session._lock:
            reader = threading.Thread(target=lambda: seen.append(session.last_shown_text))
            reader.start()
            reader.join(timeout=0.05)
            assert reader.is_alive()
        reader.join(timeout=1.0)
        assert seen == [""]

    def test_shown_text_published_from_timer_thread(self, sink) -> None:
        shown = threading.Event()
        sink.show = lambda text, items: shown.set()
        session = SelectionSession(sink, debouncer=Debouncer(0.0))

        session.on_selection("2+2")
        assert shown.wait(timeout=2.0)
        assert session.last_shown_text == "2+2"

        session.on_selection("2+2")
        assert not session.debouncer.pending
