"""Split the current process off from the invoking terminal."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Callable, Sequence

import structlog

from .errors import DetachError

logger = structlog.get_logger(__name__)


def can_fork() -> bool:
    return hasattr(os, "fork") and hasattr(os, "setsid")


def spawn_detached(task: Callable[[], object], respawn_args: Sequence[str]) -> int:
    """Run ``task`` in the background, detached from the controlling terminal.

    Returns the background process id to the caller, which is expected to exit
    right away. Where ``os.fork`` exists the child becomes a new session leader,
    runs ``task`` and exits with status 0 whatever ``task`` did; it never
    returns. Elsewhere an independent ``python -m bgrun`` child is started with
    ``respawn_args`` in its own process group and ``task`` is not used.
    """
    if not can_fork():
        return _respawn(respawn_args)

    # Buffered output would otherwise be written twice, once per process.
    sys.stdout.flush()
    sys.stderr.flush()
    try:
        pid = os.fork()
    except OSError as exc:
        raise DetachError(str(exc)) from exc

    if pid > 0:
        return pid

    os.setsid()
    try:
        task()
    except Exception:
        logger.exception("background task failed")
    finally:
        sys.stdout.flush()
        sys.stderr.flush()
        os._exit(0)


def _respawn(respawn_args: Sequence[str]) -> int:
    cmd = [sys.executable, "-m", "bgrun", *respawn_args]
    if sys.platform == "win32":
        # A console of its own gives the popup somewhere to draw.
        creationflags = subprocess.CREATE_NEW_CONSOLE | subprocess.CREATE_NEW_PROCESS_GROUP
        kwargs = {"creationflags": creationflags}
    else:
        kwargs = {"start_new_session": True}
    try:
        proc = subprocess.Popen(cmd, **kwargs)
    except OSError as exc:
        raise DetachError(str(exc)) from exc
    logger.debug("respawned detached child", pid=proc.pid)
    return proc.pid
