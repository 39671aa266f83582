"""Run the completion command through the shell.

The command string goes to the shell verbatim; quoting it correctly is
the caller's job. Output is captured, not echoed.

A failing command never aborts the run: CommandService reports it as a
failed ServiceResult which the CLI prints as a warning while keeping
the exit status of the countdown itself.
"""

from __future__ import annotations

import logging
import subprocess

from endzeit.domain.errors import CommandLaunchError
from endzeit.domain.models import ExecutionResult
from endzeit.services.base import BaseService
from endzeit.services.result import ServiceError, ServiceResult
from endzeit.services.telemetry import traced

logger = logging.getLogger(__name__)


class CommandExecutor:
    """Dispatch a command string to a shell and wait for it."""

    def __init__(self, *, shell: str | None = None, timeout: float | None = None) -> None:
        self._shell = shell
        self._timeout = timeout

    def execute(self, command: str | None) -> ExecutionResult:
        """Run *command* synchronously. No-op for an empty command.

        Raises:
            CommandLaunchError: The shell could not be started, or the
                command outlived the configured timeout.
        """
        if command is None or not command.strip():
            return ExecutionResult(ran=False)

        try:
            proc = subprocess.run(
                command,
                shell=True,
                executable=self._shell,
                capture_output=True,
                text=True,
                errors="replace",
                timeout=self._timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            msg = f"Command timed out after {exc.timeout}s: {command}"
            raise CommandLaunchError(msg) from exc
        except OSError as exc:
            msg = f"Could not launch command '{command}': {exc}"
            raise CommandLaunchError(msg) from exc

        return ExecutionResult(
            command=command,
            ran=True,
            returncode=proc.returncode,
            stdout=proc.stdout,
            stderr=proc.stderr,
        )


class CommandService(BaseService):
    """Wraps CommandExecutor in the ServiceResult contract."""

    @traced
    def execute(self, command: str | None) -> ServiceResult:
        op = "run_command"
        cfg = self._settings.command
        executor = CommandExecutor(shell=cfg.shell, timeout=cfg.timeout_seconds)

        try:
            result = executor.execute(command)
        except CommandLaunchError as exc:
            logger.debug("Command launch failed: %s", exc)
            return self._failure(op, exc, command=command)

        if not result.ran:
            return ServiceResult(ok=True, op=op, data={"ran": False})

        logger.debug(
            "Command exited with %s (stdout=%r, stderr=%r)",
            result.returncode,
            result.stdout,
            result.stderr,
        )
        data = {"command": result.command, "ran": True, "returncode": result.returncode}
        if result.ok:
            return ServiceResult(ok=True, op=op, data=data)
        return ServiceResult(
            ok=False,
            op=op,
            data=data,
            error=ServiceError(
                code="COMMAND_FAILED",
                message=f"Command exited with status {result.returncode}",
                detail={"command": result.command, "stderr": result.stderr.strip()},
            ),
        )
