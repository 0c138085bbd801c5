"""Host DMI collection through the dmidecode command."""
from __future__ import annotations

import logging
from typing import Optional, Protocol, Tuple

from ..config import InjectorConfig
from ..util import subprocess as subprocess_util

LOGGER = logging.getLogger(__name__)


class HardwareInfoSource(Protocol):
    def get_string(self, keyword: str) -> str:  # pragma: no cover - protocol
        ...

    def dump_type(self, dmi_type: int) -> str:  # pragma: no cover - protocol
        ...


class DmidecodeSource:
    """Runs dmidecode with elevated privileges and a non-localized environment."""

    def __init__(self, config: InjectorConfig) -> None:
        self.config = config
        self._env = config.child_env()

    def _command(self, *args: str) -> list[str]:
        return [*self.config.privilege_command, self.config.dmidecode, *args]

    def get_string(self, keyword: str) -> str:
        output = subprocess_util.capture(self._command("--string", keyword), env=self._env)
        return output.strip()

    def dump_type(self, dmi_type: int) -> str:
        return subprocess_util.capture(self._command("--type", str(dmi_type)), env=self._env)


def find_record_line(dump: str, label: str) -> Optional[str]:
    """Return the first line of ``dump`` holding ``label`` followed by a colon."""
    needle = f"{label}: "
    for line in dump.splitlines():
        if needle in line:
            return line
    return None


def record_value(dump: str, label: str) -> str:
    line = find_record_line(dump, label)
    if line is None:
        LOGGER.debug("No %r entry in dmidecode output", label)
        return ""
    return line.split(":", 1)[1].strip()


def split_revision(value: str) -> Tuple[str, str]:
    """Split ``major.minor`` into its parts; a missing part comes back empty."""
    major, _, minor = value.partition(".")
    return major, minor


def revision_value(dump: str, label: str) -> str:
    """Last token of the ``label`` line, e.g. ``5.17`` for ``BIOS Revision: 5.17``."""
    line = find_record_line(dump, label)
    if line is None:
        LOGGER.debug("No %r entry in dmidecode output", label)
        return ""
    tokens = line.split()
    return tokens[-1] if tokens else ""
