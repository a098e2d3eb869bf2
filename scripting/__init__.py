"""Command language and script runner over the image store."""

from .commands import Command, ExitRequested, PARSERS, parse_command
from .runner import ScriptRunner

__all__ = ['Command', 'ExitRequested', 'PARSERS', 'parse_command', 'ScriptRunner']
