"""Exceptions raised while injecting host information."""
from __future__ import annotations

from typing import Optional, Sequence


class InjectorError(RuntimeError):
    """Base class for every fatal condition reported by the CLI."""


class InvalidArgumentsError(InjectorError):
    pass


class MissingDependencyError(InjectorError):
    def __init__(self, software: Sequence[str]) -> None:
        self.software = list(software)
        super().__init__(f"Runtime dependency checking failed, missing: {', '.join(self.software)}")


class UnsupportedFirmwareError(InjectorError):
    def __init__(self, firmware: Optional[str]) -> None:
        self.firmware = firmware
        super().__init__(f"Unsupported firmware type {firmware!r}")


class CommandError(InjectorError):
    def __init__(self, cmd: Sequence[str], returncode: Optional[int], stderr: str = "") -> None:
        self.cmd = list(cmd)
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.strip() or "no error output"
        if returncode is None:
            message = f"Unable to run {self.cmd[0]}: {detail}"
        else:
            message = f"Command {' '.join(self.cmd)} failed with exit code {returncode}: {detail}"
        super().__init__(message)
