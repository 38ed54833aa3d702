"""Background job bookkeeping and the fg, bg and jobs builtins."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class Job:
    """A process group started by the shell and not yet finished."""

    gpid: int
    last_pid: int
    cmd: str


@dataclass
class JobTable:
    """The shell's list of jobs, oldest first.

    The process-control calls are attributes so that another implementation
    can be supplied.
    """

    jobs: list[Job] = field(default_factory=list)
    kill: Callable[[int, int], None] = field(default=os.kill, repr=False)
    waitpid: Callable[[int, int], tuple[int, int]] = field(
        default=os.waitpid, repr=False
    )
    tcsetpgrp: Callable[[int, int], None] = field(default=os.tcsetpgrp, repr=False)
    getpgrp: Callable[[], int] = field(default=os.getpgrp, repr=False)

    def __iter__(self) -> Iterator[Job]:
        return iter(self.jobs)

    def __len__(self) -> int:
        return len(self.jobs)

    def add(self, gpid: int, last_pid: int, cmd: str) -> Job:
        """Record a new job at the end of the list and return it."""
        job = Job(gpid, last_pid, cmd)
        self.jobs.append(job)
        return job

    def remove(self, job: Job) -> None:
        """Forget ``job``."""
        self.jobs.remove(job)

    def select(self, number: int) -> Job | None:
        """Pick a job by its 1-based number; ``0`` means the latest one.

        A negative number picks the first job. ``None`` when there is none.
        """
        if not self.jobs:
            return None
        if number == 0:
            return self.jobs[-1]
        index = max(number, 1) - 1
        return self.jobs[index] if index < len(self.jobs) else None

    def list_lines(self) -> list[str]:
        """Lines printed by the ``jobs`` builtin."""
        return [
            f"[{number}] => {{{job.cmd}}} {job.gpid}"
            for number, job in enumerate(self.jobs, 1)
        ]

    def reap(self) -> list[str]:
        """Drop finished jobs and return a ``Done.`` line for each one."""
        reports: list[str] = []
        while True:
            for number, job in enumerate(self.jobs, 1):
                if self._finished(job):
                    reports.append(f"[{number}] [{job.cmd}] {job.gpid} Done.")
                    self.remove(job)
                    break
            else:
                return reports

    def foreground(self, number: int = 0) -> int | None:
        """Resume a job in the foreground and wait until it stops or ends.

        Returns the wait status, or ``None`` if waiting failed. A job that
        did not merely stop is removed from the table.
        """
        job = self._require(number, "fg")
        self._resume(job)
        self._give_terminal(job.gpid)
        status = self._wait(job.last_pid)
        self._give_terminal(self.getpgrp())
        if status is None or not os.WIFSTOPPED(status):
            self.remove(job)
        return status

    def background(self, number: int = 0) -> Job:
        """Resume a job in the background and return it."""
        job = self._require(number, "bg")
        self._resume(job)
        self._give_terminal(self.getpgrp())
        return job

    def _require(self, number: int, builtin: str) -> Job:
        job = self.select(number)
        if job is None:
            raise LookupError(f"dogesh: {builtin}: current: no such job")
        return job

    def _resume(self, job: Job) -> None:
        try:
            self.kill(-job.gpid, signal.SIGCONT)
        except OSError as err:
            raise OSError("Syscall kill failed.") from err

    def _give_terminal(self, pgid: int) -> None:
        try:
            self.tcsetpgrp(0, pgid)
        except OSError:
            sys.stderr.write("Syscall tcsetpgrp failed.\n")

    def _wait(self, pid: int) -> int | None:
        try:
            _, status = self.waitpid(pid, os.WUNTRACED)
        except ChildProcessError:
            sys.stderr.write("WAIT FAILED.\n")
            return None
        return status

    def _finished(self, job: Job) -> bool:
        try:
            pid, status = self.waitpid(job.last_pid, os.WNOHANG)
        except ChildProcessError:
            return False
        return pid == job.last_pid and not os.WIFSTOPPED(status)