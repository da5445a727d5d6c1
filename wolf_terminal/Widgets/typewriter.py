# typewriter.py
# Widget that types out nested, styled content one character at a time
#
# Imports
from typing import Any, Callable, Optional

from rich.cells import cell_len
from rich.text import Text
from textual.message import Message
from textual.reactive import reactive
from textual.timer import Timer
from textual.widgets import Static
from loguru import logger

from ..config import get_typewriter_settings
from ..Typewriter import (
    ContentNode,
    RevealScheduler,
    project,
    require_positive,
    to_content_node,
    to_text,
)


class Typewriter(Static):
    """Reveal content as if it were being typed, followed by a blinking cursor.

    Content can be a string, a number, a list of parts, Rich ``Text`` or a
    ready-made content tree. Handing the widget a different content object
    starts a new reveal; the abandoned one never reports completion.
    """

    DEFAULT_CSS = """
    Typewriter {
        height: auto;
    }
    """

    # Frozen reveal without a cursor, e.g. after the user interrupts
    stopped: reactive[bool] = reactive(False, init=False)

    class Updated(Message):
        """Posted after each tick that revealed more characters."""

        def __init__(self, typewriter: "Typewriter") -> None:
            super().__init__()
            self.typewriter = typewriter

        @property
        def control(self) -> "Typewriter":
            return self.typewriter

    class Completed(Message):
        """Posted once when the whole content has been revealed."""

        def __init__(self, typewriter: "Typewriter") -> None:
            super().__init__()
            self.typewriter = typewriter

        @property
        def control(self) -> "Typewriter":
            return self.typewriter

    def __init__(
        self,
        content: Any = None,
        *,
        step: Optional[int] = None,
        speed_ms: Optional[int] = None,
        cursor: Optional[str] = None,
        cursor_style: Optional[str] = None,
        blink_interval: Optional[float] = None,
        stopped: bool = False,
        on_update: Optional[Callable[[], Any]] = None,
        on_complete: Optional[Callable[[], Any]] = None,
        **kwargs
    ) -> None:
        """Initialize the typewriter.

        Args:
            content: What to reveal
            step: Characters revealed per tick
            speed_ms: Milliseconds between ticks
            cursor: Glyph shown after the revealed text while typing
            cursor_style: Rich style for the cursor glyph
            blink_interval: Seconds between cursor blinks, 0 to disable
            stopped: Start frozen, without a cursor
            on_update: Called after each tick that revealed more characters
            on_complete: Called once when the content is fully revealed
        """
        super().__init__("", **kwargs)
        settings = get_typewriter_settings()
        self.step = step if step is not None else settings.step
        self.speed_ms = speed_ms if speed_ms is not None else settings.speed_ms
        require_positive("step", self.step)
        require_positive("speed_ms", self.speed_ms)
        self.cursor = cursor if cursor is not None else settings.cursor
        self.cursor_style = cursor_style if cursor_style is not None else settings.cursor_style
        self.blink_interval = blink_interval if blink_interval is not None else settings.blink_interval
        self.on_update_callback = on_update
        self.on_complete_callback = on_complete

        self._scheduler: Optional[RevealScheduler] = None
        self._blink_timer: Optional[Timer] = None
        self._cursor_visible = True
        self._halted = False
        self._source: Any = None
        self._tree: Optional[ContentNode] = None
        self.rendered_text = Text()

        self.set_reactive(Typewriter.stopped, stopped)
        if content is not None:
            self._adopt(content)

    # Public API

    @property
    def content_tree(self) -> Optional[ContentNode]:
        return self._tree

    @property
    def revealed_count(self) -> int:
        return self._scheduler.revealed_count if self._scheduler else 0

    @property
    def total(self) -> int:
        return self._scheduler.total if self._scheduler else 0

    @property
    def is_complete(self) -> bool:
        return bool(self._scheduler and self._scheduler.is_complete)

    @property
    def show_cursor(self) -> bool:
        """Whether the trailing cursor belongs on screen right now."""
        return self._tree is not None and not (self.is_complete or self.stopped or self._halted)

    def reveal(self, content: Any) -> None:
        """Reveal ``content`` from the start unless it is the current content object."""
        if content is self._source and self._tree is not None:
            return
        self._adopt(content)
        if self._scheduler is not None:
            self._start_session()

    def finish(self) -> None:
        """Skip ahead to the fully revealed content."""
        if self._scheduler is not None:
            self._scheduler.finish()

    def halt(self) -> None:
        """Freeze the reveal where it is for good and release both timers.

        Unlike setting ``stopped``, a halted reveal cannot be resumed. Only
        ``reveal()`` with new content starts a new session, which types once
        ``stopped`` is cleared.
        """
        self._halted = True
        self.stopped = True
        if self._scheduler is not None:
            self._scheduler.cancel()
        self._stop_blink()

    # Lifecycle

    def on_mount(self) -> None:
        """Create the scheduler and start revealing any initial content."""
        self._scheduler = RevealScheduler(self._make_timer)
        self._scheduler.set_stopped(self.stopped)
        if self._tree is not None and not self._halted:
            self._start_session()

    def on_unmount(self) -> None:
        """Release both timers."""
        if self._scheduler is not None:
            self._scheduler.cancel()
        self._stop_blink()

    def watch_stopped(self, stopped: bool) -> None:
        if self._scheduler is not None:
            self._scheduler.set_stopped(stopped)
        logger.debug(f"Typewriter {'stopped' if stopped else 'resumed'} at {self.revealed_count}/{self.total}")
        self._refresh_display()

    # Internals

    def _adopt(self, content: Any) -> None:
        self._source = content
        self._tree = to_content_node(content)

    def _make_timer(self, interval: float, callback: Callable[[], None]) -> Timer:
        return self.set_interval(interval, callback, name="typewriter-reveal")

    def _start_session(self) -> None:
        self._halted = False
        self._start_blink()
        self._scheduler.start(
            self._tree,
            self.step,
            self.speed_ms,
            on_update=self._handle_update,
            on_complete=self._handle_complete,
        )
        self._refresh_display()

    def _handle_update(self) -> None:
        self._refresh_display()
        self.post_message(self.Updated(self))
        if self.on_update_callback:
            self.on_update_callback()

    def _handle_complete(self) -> None:
        # Nothing left to blink
        self._stop_blink()
        self._refresh_display()
        self.post_message(self.Completed(self))
        if self.on_complete_callback:
            self.on_complete_callback()

    def _start_blink(self) -> None:
        if self.blink_interval > 0 and self._blink_timer is None:
            self._cursor_visible = True
            self._blink_timer = self.set_interval(self.blink_interval, self._toggle_cursor, name="typewriter-blink")

    def _stop_blink(self) -> None:
        if self._blink_timer is not None:
            self._blink_timer.stop()
            self._blink_timer = None

    def _toggle_cursor(self) -> None:
        self._cursor_visible = not self._cursor_visible
        if self.show_cursor:
            self._refresh_display()

    def _refresh_display(self) -> None:
        if self._tree is None:
            text = Text()
        else:
            text = to_text(project(self._tree, self.revealed_count))
        if self.show_cursor:
            if self._cursor_visible:
                text.append(self.cursor, style=self.cursor_style)
            else:
                text.append(" " * cell_len(self.cursor))
        self.rendered_text = text
        self.update(text)

#
# End of typewriter.py
#######################################################################################################################
