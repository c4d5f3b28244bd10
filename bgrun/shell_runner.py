from __future__ import annotations

import os
import subprocess
import time
from dataclasses import dataclass
from typing import Optional

import structlog

from .job import SENTINEL_EXIT_CODE, JobResult

logger = structlog.get_logger(__name__)


@dataclass
class ShellResult:
    success: bool
    exit_code: int
    duration_ms: int
    command: str
    cwd: str


def classify_returncode(returncode: int) -> int:
    """Map a ``subprocess`` return code onto the shell convention.

    Negative codes mean the process was killed by signal ``-returncode`` and
    become ``128 + signal``; anything else is the plain exit status.
    """
    if returncode < 0:
        return 128 + (-returncode)
    return returncode


class ShellRunner:
    """Run a command line through the system shell and wait for it.

    The command's standard streams are attached to the null device: its output
    is not captured, and it cannot draw over the terminal that later hosts the
    notification.

    ``cwd`` picks the directory the command runs in; by default it is the
    current directory of the bgrun process.
    """

    def __init__(self, cwd: Optional[str] = None):
        self.default_cwd = cwd or os.getcwd()

    def run(self, command: str) -> ShellResult:
        start_time = time.time()
        try:
            completed = subprocess.run(
                command,
                cwd=self.default_cwd,
                shell=True,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
            exit_code = classify_returncode(completed.returncode)
        except OSError as exc:
            logger.warning("shell could not be started", command=command, error=str(exc))
            exit_code = SENTINEL_EXIT_CODE

        duration_ms = int((time.time() - start_time) * 1000)
        return ShellResult(
            success=exit_code == 0,
            exit_code=exit_code,
            duration_ms=duration_ms,
            command=command,
            cwd=self.default_cwd,
        )


def execute(job: JobResult, runner: Optional[ShellRunner] = None) -> ShellResult:
    """Run ``job.command`` and publish its exit code on the job."""
    runner = runner or ShellRunner()
    logger.debug("command started", command=job.command)
    try:
        result = runner.run(job.command)
    except BaseException:
        # Publish the sentinel so the notifier is released, then propagate.
        job.publish(SENTINEL_EXIT_CODE)
        raise
    job.publish(result.exit_code)
    logger.debug("command finished", exit_code=result.exit_code, duration_ms=result.duration_ms)
    return result
