"""
Static command table for the portfolio terminal.

Every command returns a content tree for a ``Typewriter`` to reveal, or
``None`` when it produces no output. The texts here are placeholder portfolio
data; swap them for your own.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from .config import get_terminal_settings
from .Typewriter import ContentNode, styled, to_content_node

ACCENT = "bold green"
MUTED = "dim"
HEADING = "bold cyan"

ABOUT_TEXT = (
    "Hi, I'm an AI & ML Engineer.\n\n"
    "I build digital experiences with modern technologies, focused on\n"
    "accessible, human-centered AI products."
)

PROJECTS = [
    ("AI Portfolio Terminal", "An interactive terminal-based portfolio.", ["Python", "Textual", "Rich"]),
    ("E-Commerce Dashboard", "Analytics dashboard for online retailers with real-time data.", ["Next.js", "Supabase"]),
    ("Neural Style Transfer", "Artistic style transfer on images.", ["Python", "PyTorch", "Flask"]),
]

SKILLS = [
    ("Languages", ["Python", "JavaScript", "Java"]),
    ("AI & Machine Learning", ["PyTorch", "TensorFlow", "LLMs", "LangChain"]),
]


@dataclass
class CommandResult:
    """Output of one command line."""
    output: Optional[ContentNode] = None
    clear: bool = False


CommandHandler = Callable[[List[str]], CommandResult]


def _help(args: List[str]) -> CommandResult:
    parts = [styled("Available commands:\n", style=HEADING)]
    for name in sorted(COMMANDS):
        parts.append(styled(f"  {name:<10}", style=ACCENT))
        parts.append(f"{COMMAND_HELP.get(name, '')}\n")
    return CommandResult(to_content_node(parts))


def _whoami(args: List[str]) -> CommandResult:
    return CommandResult(to_content_node(get_terminal_settings().user))


def _about(args: List[str]) -> CommandResult:
    return CommandResult(to_content_node(ABOUT_TEXT))


def _projects(args: List[str]) -> CommandResult:
    parts = []
    for index, (name, description, tech) in enumerate(PROJECTS, start=1):
        parts.append(styled(f"[{index}] ", style=MUTED))
        parts.append(styled(name, style=HEADING))
        parts.append(f"\n    {description}\n    ")
        parts.append(styled(", ".join(tech), style=ACCENT))
        parts.append("\n")
    return CommandResult(to_content_node(parts))


def _skills(args: List[str]) -> CommandResult:
    parts = []
    for category, skills in SKILLS:
        parts.append(styled(f"{category}: ", style=HEADING))
        parts.append(f"{' · '.join(skills)}\n")
    return CommandResult(to_content_node(parts))


def _echo(args: List[str]) -> CommandResult:
    return CommandResult(to_content_node(" ".join(args)))


def _clear(args: List[str]) -> CommandResult:
    return CommandResult(clear=True)


COMMANDS: Dict[str, CommandHandler] = {
    "help": _help,
    "whoami": _whoami,
    "about": _about,
    "projects": _projects,
    "skills": _skills,
    "echo": _echo,
    "clear": _clear,
}

COMMAND_HELP = {
    "help": "List available commands",
    "whoami": "Print the current user",
    "about": "A short introduction",
    "projects": "Selected projects",
    "skills": "Technical skills",
    "echo": "Print the arguments",
    "clear": "Clear the terminal",
}


def run_command(line: str) -> CommandResult:
    """Resolve a command line to its output."""
    words = line.split()
    if not words:
        return CommandResult()
    name, args = words[0].lower(), words[1:]
    handler = COMMANDS.get(name)
    if handler is None:
        return CommandResult(styled(f"command not found: {words[0]}", style="bold red"))
    return handler(args)
