"""Portfolio terminal app: commands typed out by ``Typewriter`` widgets."""

from typing import Optional

from rich.text import Text
from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.reactive import reactive
from textual.widgets import Input, Static
from loguru import logger

from .commands import run_command
from .config import TerminalSettings, get_terminal_settings
from .Widgets import Typewriter


class TerminalApp(App):
    """A simulated shell whose output is revealed like it is being typed.

    References:
    - App basics: https://textual.textualize.io/guide/app/
    - Bindings: https://textual.textualize.io/guide/input/#bindings
    """

    CSS = """
    TerminalApp {
        background: #000000;
    }

    #terminal-log {
        height: 1fr;
        padding: 0 1;
    }

    #terminal-input {
        dock: bottom;
        border: none;
        background: #000000;
    }

    .command-echo {
        color: #4af626;
    }
    """

    TITLE = "Wolf OS"

    BINDINGS = [
        Binding("ctrl+c", "interrupt", "Interrupt", priority=True),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    is_typing: reactive[bool] = reactive(False, init=False)

    def __init__(self, settings: Optional[TerminalSettings] = None, **kwargs):
        super().__init__(**kwargs)
        self.settings = settings or get_terminal_settings()
        self.active_typewriter: Optional[Typewriter] = None

    @property
    def prompt(self) -> str:
        return f"{self.settings.user}@{self.settings.host}:~{self.settings.prompt}"

    def compose(self) -> ComposeResult:
        with VerticalScroll(id="terminal-log"):
            if self.settings.welcome_banner:
                # The banner is typed like command output: it holds the prompt and Ctrl+C stops it
                self.active_typewriter = Typewriter(self.settings.welcome_banner, id="welcome-banner")
                self.set_reactive(TerminalApp.is_typing, True)
                yield self.active_typewriter
        yield Input(placeholder="type a command", id="terminal-input")

    def on_mount(self) -> None:
        command_input = self.query_one("#terminal-input", Input)
        command_input.disabled = self.is_typing
        if not self.is_typing:
            command_input.focus()

    @on(Input.Submitted, "#terminal-input")
    async def handle_command(self, event: Input.Submitted) -> None:
        """Echo the command line and type out its output."""
        line = event.value
        event.input.value = ""
        if self.is_typing:
            return

        log = self.query_one("#terminal-log", VerticalScroll)
        await log.mount(Static(Text(self.prompt + line), classes="command-echo"))
        logger.debug(f"Command submitted: {line!r}")

        result = run_command(line)
        if result.clear:
            await log.remove_children()
            return
        if result.output is None:
            log.scroll_end(animate=False)
            return

        self.active_typewriter = Typewriter(result.output, classes="command-output")
        self.is_typing = True
        await log.mount(self.active_typewriter)
        log.scroll_end(animate=False)

    def on_typewriter_updated(self, event: Typewriter.Updated) -> None:
        self.query_one("#terminal-log", VerticalScroll).scroll_end(animate=False)

    def on_typewriter_completed(self, event: Typewriter.Completed) -> None:
        if event.typewriter is self.active_typewriter:
            self.active_typewriter = None
            self.is_typing = False

    def watch_is_typing(self, is_typing: bool) -> None:
        command_input = self.query_one("#terminal-input", Input)
        command_input.disabled = is_typing
        if not is_typing:
            command_input.focus()

    async def action_interrupt(self) -> None:
        """Freeze the running output where it is, like Ctrl+C in a shell."""
        typewriter = self.active_typewriter
        if typewriter is None:
            return
        typewriter.halt()
        self.active_typewriter = None
        logger.info(f"Output interrupted at {typewriter.revealed_count}/{typewriter.total} chars")
        log = self.query_one("#terminal-log", VerticalScroll)
        await log.mount(Static("^C", classes="command-echo interrupt-marker"))
        self.is_typing = False
