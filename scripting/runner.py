"""Executes command scripts against an image store."""

import logging
import sys
from pathlib import Path
from typing import Iterable, Optional, TextIO

from models.errors import ImageFormatError, ImageNotFoundError, ValidationError
from models.image_store import ImageStore
from scripting.commands import ExitRequested, parse_command, tokenize
from utils.metrics import Timer

logger = logging.getLogger(__name__)

COMMAND_ERRORS = (ValidationError, ImageNotFoundError, ImageFormatError, OSError)


class ScriptRunner:
    """Runs commands one at a time, reporting each outcome to `out`.

    A failing command is reported and skipped; the script carries on with
    the next line. `exit` stops the runner.
    """

    def __init__(self, store: Optional[ImageStore] = None, out: Optional[TextIO] = None):
        self.store = store if store is not None else ImageStore()
        self.out = out if out is not None else sys.stdout
        self.finished = False
        self._active_scripts = set()

    def _report(self, message: str) -> None:
        self.out.write(message + '\n')

    def execute(self, line: str) -> bool:
        """Run a single line. Returns False once `exit` has been seen."""
        line = line.strip()
        if self.finished:
            return False
        if not line or line.startswith('#'):
            return True

        tokens = tokenize(line)
        if tokens[0] == 'run':
            return self._run_nested(tokens)

        try:
            command = parse_command(line)
            timer = Timer()
            timer.measure(command.execute, self.store)
        except ExitRequested:
            self.finished = True
            return False
        except COMMAND_ERRORS as e:
            logger.warning("Command failed: %s (%s)", line, e)
            self._report(str(e))
            return True

        logger.debug("%s took %.1f ms", command.name, timer.elapsed_ms)
        self._report(f"{command.name} command executed successfully!")
        return True

    def _run_nested(self, tokens) -> bool:
        if len(tokens) != 2:
            self._report("Invalid parameters for 'run': expected a script path")
            return True
        try:
            self.run_file(tokens[1])
        except COMMAND_ERRORS as e:
            logger.warning("Could not run script %s (%s)", tokens[1], e)
            self._report(str(e))
        return not self.finished

    def run_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            if not self.execute(line):
                break

    def run_file(self, path) -> None:
        """Run every line of a .txt script. A script may not run itself, even indirectly."""
        path = Path(path)
        if path.suffix.lower() != '.txt':
            raise ValidationError(f"Script must be a .txt file, got '{path.name}'")
        resolved = path.resolve()
        if resolved in self._active_scripts:
            raise ValidationError(f"Script {path} is already running")
        try:
            lines = path.read_text(encoding='utf-8').splitlines()
        except UnicodeDecodeError as e:
            raise ValidationError(f"Script {path} is not valid text") from e

        logger.info("Running script %s", path)
        self._active_scripts.add(resolved)
        try:
            self.run_lines(lines)
        finally:
            self._active_scripts.discard(resolved)

    def interactive(self, stream: Optional[TextIO] = None) -> None:
        self._report("Enter commands (enter 'exit' to terminate the program) :")
        self.run_lines(stream if stream is not None else sys.stdin)
