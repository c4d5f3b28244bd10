from __future__ import annotations

import threading
from dataclasses import dataclass

from .errors import JobAlreadyCompleted

SENTINEL_EXIT_CODE = -1


@dataclass(frozen=True)
class JobOutcome:
    command: str
    exit_code: int

    @property
    def success(self) -> bool:
        return self.exit_code == 0


class JobResult:
    """Single-shot handoff between the executor and the notifier.

    One writer calls :meth:`publish` exactly once; one reader calls
    :meth:`wait`, which blocks until the publish happened and returns an
    immutable :class:`JobOutcome`. Both sides go through the same condition
    variable, so the reader always observes the writer's exit code.
    """

    def __init__(self, command: str):
        self._command = command
        self._cond = threading.Condition()
        self._completed = False
        self._exit_code = SENTINEL_EXIT_CODE

    @property
    def command(self) -> str:
        return self._command

    @property
    def completed(self) -> bool:
        with self._cond:
            return self._completed

    @property
    def exit_code(self) -> int:
        with self._cond:
            return self._exit_code

    def publish(self, exit_code: int) -> None:
        with self._cond:
            if self._completed:
                raise JobAlreadyCompleted(f"job {self._command!r} already completed")
            self._exit_code = exit_code
            self._completed = True
            self._cond.notify()

    def wait(self) -> JobOutcome:
        # No timeout: a command that never exits keeps the reader here forever.
        with self._cond:
            self._cond.wait_for(lambda: self._completed)
            return JobOutcome(command=self._command, exit_code=self._exit_code)
