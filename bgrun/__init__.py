"""bgrun: run a shell command in the background and get told when it is done.

- Builds a shell command line from the given arguments
- Detaches from the invoking terminal so the prompt comes back at once
- Runs the command through the system shell
- Pops up a terminal notification with the exit code when it finishes
"""

__version__ = "0.1.0"

from .command import build_command
from .config import NotifierConfig
from .errors import BgrunError, DetachError, JobAlreadyCompleted
from .job import JobOutcome, JobResult
from .launcher import launch, run_job
from .notifier import Notifier
from .shell_runner import ShellResult, ShellRunner, execute

__all__ = [
    "build_command",
    "NotifierConfig",
    "BgrunError",
    "DetachError",
    "JobAlreadyCompleted",
    "JobOutcome",
    "JobResult",
    "launch",
    "run_job",
    "Notifier",
    "ShellResult",
    "ShellRunner",
    "execute",
]
