"""Run configuration for the injector."""
from __future__ import annotations

import os
import shlex
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple

ENV_PRIVILEGE_KEY = "VBOXHOSTINJECT_PRIVILEGE_COMMAND"
ENV_VBOXMANAGE_KEY = "VBOXHOSTINJECT_VBOXMANAGE"
DEFAULT_NAMESPACE = "VBoxInternal/Devices"

# dmidecode output is parsed as text, so it must not be localized
LOCALE_ENV: Mapping[str, str] = {
    "LANGUAGE": "en",
    "LC_MESSAGES": "C",
    "LANG": "C",
}


@dataclass(frozen=True)
class InjectorConfig:
    privilege_command: Tuple[str, ...] = ("sudo",)
    vboxmanage: str = "VBoxManage"
    dmidecode: str = "dmidecode"
    namespace: str = DEFAULT_NAMESPACE
    locale_env: Mapping[str, str] = field(default_factory=lambda: dict(LOCALE_ENV))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "InjectorConfig":
        if environ is None:
            environ = os.environ
        privilege = environ.get(ENV_PRIVILEGE_KEY)
        if privilege is None:
            privilege_command: Tuple[str, ...] = () if os.geteuid() == 0 else ("sudo",)
        else:
            privilege_command = tuple(shlex.split(privilege))
        return cls(
            privilege_command=privilege_command,
            vboxmanage=environ.get(ENV_VBOXMANAGE_KEY) or "VBoxManage",
        )

    def child_env(self) -> Dict[str, str]:
        """Environment for child processes whose output gets parsed."""
        env = dict(os.environ)
        env.update(self.locale_env)
        return env
