"""VirtualBox access through the VBoxManage command."""
from __future__ import annotations

import logging
from typing import Optional, Protocol

from .config import InjectorConfig
from .model import FirmwareType
from .util import subprocess as subprocess_util

LOGGER = logging.getLogger(__name__)


class VMConfigSink(Protocol):
    def set_extra_data(self, vm_name: str, key: str, value: str) -> None:  # pragma: no cover - protocol
        ...


class VBoxManage:
    def __init__(self, config: InjectorConfig) -> None:
        self.config = config

    def show_vm_info(self, vm_name: str) -> str:
        return subprocess_util.capture([self.config.vboxmanage, "showvminfo", "--machinereadable", vm_name])

    def detect_firmware(self, vm_name: str) -> FirmwareType:
        firmware = parse_firmware(self.show_vm_info(vm_name))
        LOGGER.debug("VM %s reports firmware=%s", vm_name, firmware)
        return FirmwareType.from_vbox(firmware)

    def set_extra_data(self, vm_name: str, key: str, value: str) -> None:
        subprocess_util.capture(
            [self.config.vboxmanage, "setextradata", vm_name, key, value],
            env=self.config.child_env(),
        )


class DryRunSink:
    """Logs the writes that would have been made."""

    def set_extra_data(self, vm_name: str, key: str, value: str) -> None:
        LOGGER.info("Dry run: would set %s on %s to %r", key, vm_name, value)


def parse_firmware(vm_info: str) -> Optional[str]:
    """Extract the quoted value of the first ``firmware=`` line."""
    for line in vm_info.splitlines():
        if line.startswith("firmware="):
            parts = line.split('"')
            return parts[1] if len(parts) > 1 else ""
    return None
