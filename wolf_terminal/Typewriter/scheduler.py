"""
Reveal scheduler for the typewriter engine.

Owns the revealed character count for one content tree at a time and a
repeating timer that advances it. The timer comes from a factory so the
scheduler can be driven by Textual (``Widget.set_interval``) or by a manual
clock in tests.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol

from loguru import logger

from .content_nodes import ContentNode, text_length
from .exceptions import InvalidStepError


class TimerHandle(Protocol):
    """Anything with a ``stop()`` method, such as ``textual.timer.Timer``."""

    def stop(self) -> Any:
        ...


TimerFactory = Callable[[float, Callable[[], None]], TimerHandle]
Callback = Optional[Callable[[], Any]]

_NO_SESSION = object()


def require_positive(name: str, value: Any) -> None:
    """Raise ``InvalidStepError`` unless ``value`` is a positive int."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidStepError(name, value)


class RevealScheduler:
    """Advance a reveal count towards a tree's length on a fixed interval.

    One scheduler tracks one session at a time. A session is tied to the
    identity of the content tree: presenting a different tree object abandons
    the current session without firing its completion.
    """

    def __init__(self, timer_factory: TimerFactory):
        self._timer_factory = timer_factory
        self._timer: Optional[TimerHandle] = None
        # Bumped for every new session and on cancel; a timer only acts on
        # the generation it was created for
        self._generation = 0
        self._session: Any = _NO_SESSION
        self._revealed = 0
        self._total = 0
        self._step = 1
        self._stopped = False
        self._completed = False
        self._on_update: Callback = None
        self._on_complete: Callback = None

    # Properties

    @property
    def revealed_count(self) -> int:
        return self._revealed

    @property
    def total(self) -> int:
        return self._total

    @property
    def session(self) -> Optional[ContentNode]:
        return None if self._session is _NO_SESSION else self._session

    @property
    def stopped(self) -> bool:
        return self._stopped

    @property
    def is_complete(self) -> bool:
        return self._completed

    @property
    def is_running(self) -> bool:
        return self._timer is not None

    # Session control

    def start(
        self,
        tree: ContentNode,
        step: int,
        interval_ms: int,
        on_update: Callback = None,
        on_complete: Callback = None,
    ) -> None:
        """Begin revealing ``tree``.

        Starting again with the tree of the current session does not create
        a second timer; it only adopts the latest handlers and step. Starting
        with any other tree supersedes the current session.

        Args:
            tree: Content tree to reveal
            step: Characters revealed per tick
            interval_ms: Milliseconds between ticks
            on_update: Called after every tick that advanced the count
            on_complete: Called once when the count reaches the total

        Raises:
            InvalidStepError: If ``step`` or ``interval_ms`` is not positive
        """
        require_positive("step", step)
        require_positive("interval_ms", interval_ms)
        self._on_update = on_update
        self._on_complete = on_complete
        if tree is self._session:
            self._step = step
            return
        self.restart(tree, step, interval_ms, on_update, on_complete)

    def restart(
        self,
        tree: ContentNode,
        step: int,
        interval_ms: int,
        on_update: Callback = None,
        on_complete: Callback = None,
    ) -> None:
        """Replace the current session with ``tree`` if it is a different object.

        The old session's timer is stopped and its completion never fires.
        """
        if tree is self._session:
            self.start(tree, step, interval_ms, on_update, on_complete)
            return
        require_positive("step", step)
        require_positive("interval_ms", interval_ms)
        self._on_update = on_update
        self._on_complete = on_complete

        if self._session is not _NO_SESSION and not self._completed:
            logger.debug(f"Reveal session superseded at {self._revealed}/{self._total} chars")
        self._cancel_timer()
        self._begin(tree, step, interval_ms)

    def set_stopped(self, stopped: bool) -> None:
        """Pause or resume ticking without touching the timer."""
        self._stopped = bool(stopped)

    def finish(self) -> None:
        """Reveal the rest of the current session immediately."""
        if self._session is _NO_SESSION or self._completed:
            return
        if self._revealed < self._total:
            self._revealed = self._total
            if self._on_update:
                self._on_update()
        self._complete()

    def cancel(self) -> None:
        """Stop the timer for good and end the session. Late ticks from it are ignored.

        The counts are left as they were so a frozen partial reveal can still
        be rendered. Starting again, even with the same tree, begins a new
        session from zero.
        """
        if self._timer is not None:
            logger.debug(f"Reveal timer cancelled at {self._revealed}/{self._total} chars")
        self._generation += 1
        self._session = _NO_SESSION
        self._cancel_timer()

    def __enter__(self) -> "RevealScheduler":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.cancel()

    # Internals

    def _begin(self, tree: ContentNode, step: int, interval_ms: int) -> None:
        self._generation += 1
        self._session = tree
        self._step = step
        self._revealed = 0
        self._completed = False
        self._total = text_length(tree)
        logger.debug(f"Reveal session started: {self._total} chars, step={step}, interval={interval_ms}ms")

        if self._total == 0:
            self._complete()
            return

        generation = self._generation
        self._timer = self._timer_factory(interval_ms / 1000, lambda: self._tick(generation))

    def _tick(self, generation: int) -> None:
        if generation != self._generation or self._completed:
            return
        if self._stopped:
            return

        self._revealed = min(self._revealed + self._step, self._total)
        if self._on_update:
            self._on_update()

        # The update handler may have replaced the session
        if generation != self._generation:
            return
        if self._revealed >= self._total:
            self._complete()

    def _complete(self) -> None:
        self._cancel_timer()
        if self._completed:
            return
        self._completed = True
        logger.debug(f"Reveal session complete: {self._total} chars")
        if self._on_complete:
            self._on_complete()

    def _cancel_timer(self) -> None:
        timer, self._timer = self._timer, None
        if timer is not None:
            timer.stop()
