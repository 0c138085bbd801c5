"""Runtime dependency checks for the external tools the injector drives."""
from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import List

from .config import InjectorConfig
from .errors import MissingDependencyError

LOGGER = logging.getLogger(__name__)

SOFTWARE_BY_COMMAND = {
    "dmidecode": "Dmidecode",
    "VBoxManage": "Oracle VirtualBox",
}


def required_commands(config: InjectorConfig) -> List[str]:
    commands = [config.vboxmanage, config.dmidecode]
    if config.privilege_command:
        commands.append(config.privilege_command[0])
    return commands


def check_dependencies(config: InjectorConfig) -> None:
    missing: List[str] = []
    for command in required_commands(config):
        if shutil.which(command) is not None:
            continue
        software = SOFTWARE_BY_COMMAND.get(Path(command).name, command)
        LOGGER.error(
            'This program requires "%s" to be installed and its executables in the executable searching PATHs',
            software,
        )
        missing.append(software)
    if missing:
        raise MissingDependencyError(missing)
