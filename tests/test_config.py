from __future__ import annotations

import os

from vboxhostinject import config as config_mod
from vboxhostinject.config import ENV_PRIVILEGE_KEY, ENV_VBOXMANAGE_KEY, InjectorConfig
from vboxhostinject.dependencies import required_commands


def test_privilege_command_from_env() -> None:
    config = InjectorConfig.from_env({ENV_PRIVILEGE_KEY: "doas -n"})

    assert config.privilege_command == ("doas", "-n")
    assert required_commands(config) == ["VBoxManage", "dmidecode", "doas"]


def test_empty_privilege_command_disables_elevation() -> None:
    config = InjectorConfig.from_env({ENV_PRIVILEGE_KEY: ""})

    assert config.privilege_command == ()
    assert required_commands(config) == ["VBoxManage", "dmidecode"]


def test_default_privilege_depends_on_effective_user(monkeypatch) -> None:
    monkeypatch.setattr(config_mod.os, "geteuid", lambda: 0)
    assert InjectorConfig.from_env({}).privilege_command == ()

    monkeypatch.setattr(config_mod.os, "geteuid", lambda: 1000)
    assert InjectorConfig.from_env({}).privilege_command == ("sudo",)


def test_vboxmanage_override() -> None:
    config = InjectorConfig.from_env({ENV_PRIVILEGE_KEY: "sudo", ENV_VBOXMANAGE_KEY: "/opt/vbox/VBoxManage"})

    assert config.vboxmanage == "/opt/vbox/VBoxManage"
    assert config.namespace == "VBoxInternal/Devices"


def test_child_env_overrides_locale_only(monkeypatch) -> None:
    monkeypatch.setenv("LANG", "zh_TW.UTF-8")
    monkeypatch.setenv("VBOXHOSTINJECT_MARKER", "kept")

    env = InjectorConfig().child_env()

    assert env["LANG"] == "C"
    assert env["LC_MESSAGES"] == "C"
    assert env["LANGUAGE"] == "en"
    assert env["VBOXHOSTINJECT_MARKER"] == "kept"
    assert os.environ["LANG"] == "zh_TW.UTF-8"
