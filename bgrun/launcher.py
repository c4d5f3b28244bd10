from __future__ import annotations

import threading
from typing import List, Optional, Sequence

import click
import structlog

from .command import build_command
from .config import NotifierConfig
from .detach import spawn_detached
from .job import JobResult
from .notifier import Notifier
from .shell_runner import ShellRunner, execute

logger = structlog.get_logger(__name__)


def run_job(
    job: JobResult,
    runner: Optional[ShellRunner] = None,
    notifier: Optional[Notifier] = None,
) -> None:
    """Run the executor and the notifier side by side and wait for both."""
    runner = runner or ShellRunner()
    notifier = notifier or Notifier()
    executor_thread = threading.Thread(target=execute, args=(job, runner), name="bgrun-executor")
    notifier_thread = threading.Thread(target=notifier.notify, args=(job,), name="bgrun-notifier")
    executor_thread.start()
    notifier_thread.start()
    executor_thread.join()
    notifier_thread.join()


def respawn_args(args: Sequence[str], config: NotifierConfig, verbose: bool = False) -> List[str]:
    """Arguments that make a fresh ``bgrun`` process run ``args`` in the foreground."""
    out = ["--no-detach"]
    if verbose:
        out.append("--verbose")
    if not config.use_color:
        out.append("--no-color")
    out.append("--")
    out.extend(args)
    return out


def launch(
    args: Sequence[str],
    config: Optional[NotifierConfig] = None,
    *,
    detach: bool = True,
    verbose: bool = False,
    runner: Optional[ShellRunner] = None,
) -> int:
    """Start ``args`` as a background job and return this process's exit status.

    With ``detach`` the caller gets control back immediately while a detached
    child runs the job; otherwise the job runs here and this call returns once
    the notification is dismissed. The user command's own exit code is never
    returned: it only appears in the notification.
    """
    config = config or NotifierConfig()
    job = JobResult(build_command(args))
    notifier = Notifier(config)

    if not detach:
        run_job(job, runner, notifier)
        return 0

    click.echo(f"Starting background command: {job.command}")
    click.echo("You can continue using the terminal. A notification will appear when complete.")
    pid = spawn_detached(
        lambda: run_job(job, runner, notifier),
        respawn_args(args, config, verbose=verbose),
    )
    logger.debug("detached", pid=pid)
    return 0
