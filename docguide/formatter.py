from __future__ import annotations

import io
import logging
import os
import signal
import subprocess
import threading
from typing import IO, Callable, Optional, Sequence, TextIO, Union

from .config import DEFAULT_FORMATTER_COMMAND, GuideConfig

logger = logging.getLogger(__name__)

DocumentWriter = Callable[[TextIO], None]
Document = Union[str, DocumentWriter]

DIAGNOSTIC_PREFIX = "[ERROR]"


def format_diagnostic(message: object) -> str:
    """Build the inline diagnostic shown in place of content that failed to generate."""

    return f"{DIAGNOSTIC_PREFIX} {message}"


class ExternalFormatter:
    """Pipe a document through an external formatter such as ``groff``.

    ``convert`` never raises: launch and execution failures come back as a
    diagnostic string so the rest of the guide can still be produced.
    """

    def __init__(
        self,
        command: Sequence[str] = DEFAULT_FORMATTER_COMMAND,
        *,
        timeout: Optional[float] = None,
    ) -> None:
        self.command = tuple(command)
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: GuideConfig) -> "ExternalFormatter":
        return cls(config.formatter_command, timeout=config.formatter_timeout)

    def convert(self, document: Document) -> str:
        if not self.command:
            return format_diagnostic("no formatter command configured")

        try:
            process = subprocess.Popen(
                self.command,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                start_new_session=True,
            )
        except (OSError, ValueError, subprocess.SubprocessError) as exc:
            logger.warning("Could not start formatter %s: %s", self.command[0], exc)
            return format_diagnostic(exc)

        # The child may block writing output before it has read all of its
        # input, so feeding happens on its own thread while this one drains.
        feeder = threading.Thread(
            target=_feed_document,
            args=(process.stdin, document),
            name="formatter-feed",
            daemon=True,
        )
        feeder.start()

        drained = threading.Event()
        timed_out = threading.Event()
        cut_short = threading.Event()
        timer: Optional[threading.Timer] = None
        if self.timeout is not None:
            timer = threading.Timer(self.timeout, _expire, args=(process, drained, timed_out, cut_short))
            timer.daemon = True
            timer.start()

        try:
            with process.stdout:
                output = process.stdout.read()
            drained.set()
            returncode = process.wait()
        except OSError as exc:
            _kill_group(process)
            process.wait()
            logger.warning("Reading formatter output failed: %s", exc)
            return format_diagnostic(exc)
        finally:
            if timer is not None:
                timer.cancel()

        # A run that had finished its output and exited cleanly as the timer
        # fired still counts as done.
        if timed_out.is_set() and (returncode != 0 or cut_short.is_set()):
            logger.warning("Formatter %s timed out after %s seconds", self.command[0], self.timeout)
            return format_diagnostic(f"formatter timed out after {self.timeout} seconds")
        if returncode < 0:
            logger.warning("Formatter %s terminated by signal %d", self.command[0], -returncode)
            return format_diagnostic(f"signal: {-returncode}")
        if returncode != 0:
            logger.warning("Formatter %s exited with status %d", self.command[0], returncode)
            return format_diagnostic(f"exit status {returncode}")

        return output.decode("utf-8", errors="replace")


def _feed_document(stdin: IO[bytes], document: Document) -> None:
    try:
        if callable(document):
            buffer = io.StringIO()
            document(buffer)
            text = buffer.getvalue()
        else:
            text = document
        stdin.write(text.encode("utf-8"))
    except Exception:
        # Usually the child exited before reading everything; the drain side reports it.
        logger.debug("Feeding the formatter failed", exc_info=True)
    finally:
        try:
            stdin.close()
        except OSError:
            logger.debug("Closing formatter stdin failed", exc_info=True)


def _kill_group(process: subprocess.Popen) -> bool:
    # groff runs troff and grohtml as children that share the output pipe.
    try:
        os.killpg(process.pid, signal.SIGKILL)
    except (ProcessLookupError, PermissionError):
        return False
    return True


def _expire(
    process: subprocess.Popen,
    drained: threading.Event,
    timed_out: threading.Event,
    cut_short: threading.Event,
) -> None:
    if process.returncode is not None:
        return
    output_pending = not drained.is_set()
    if _kill_group(process):
        if output_pending:
            cut_short.set()
        timed_out.set()


__all__ = [
    "DIAGNOSTIC_PREFIX",
    "Document",
    "DocumentWriter",
    "ExternalFormatter",
    "format_diagnostic",
]
