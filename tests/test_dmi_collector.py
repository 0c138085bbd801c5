from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

from vboxhostinject.collectors import dmi
from vboxhostinject.config import InjectorConfig
from vboxhostinject.errors import CommandError
from vboxhostinject.util import subprocess as subprocess_util

FIXTURES = Path(__file__).parent / "fixtures"


def _dump(dmi_type: int) -> str:
    return (FIXTURES / f"dmidecode_type{dmi_type}.txt").read_text(encoding="utf-8")


def test_record_value_takes_text_after_colon() -> None:
    assert dmi.record_value(_dump(1), "SKU Number") == "LENOVO_MT_20QD_BU_Think_FM_ThinkPad X1 Carbon 7th"
    assert dmi.record_value(_dump(1), "Family") == "ThinkPad X1 Carbon 7th"
    assert dmi.record_value(_dump(2), "Location In Chassis") == "Not Available"
    assert dmi.record_value(_dump(2), "Type") == "Motherboard"


def test_record_value_missing_label_is_empty() -> None:
    assert dmi.record_value(_dump(0), "SKU Number") == ""


def test_revision_value_and_split() -> None:
    assert dmi.revision_value(_dump(0), "BIOS Revision") == "1.76"
    assert dmi.split_revision(dmi.revision_value(_dump(0), "Firmware Revision")) == ("1", "28")
    assert dmi.split_revision("5") == ("5", "")
    assert dmi.split_revision("") == ("", "")


def test_source_runs_dmidecode_elevated_with_c_locale(monkeypatch) -> None:
    calls = []

    def fake_capture(cmd, env=None):
        calls.append((list(cmd), env))
        return "  LENOVO \n"

    monkeypatch.setenv("LANG", "de_DE.UTF-8")
    monkeypatch.setattr(subprocess_util, "capture", fake_capture)
    source = dmi.DmidecodeSource(InjectorConfig(privilege_command=("sudo", "-n")))

    assert source.get_string("bios-vendor") == "LENOVO"
    source.dump_type(2)

    assert calls[0][0] == ["sudo", "-n", "dmidecode", "--string", "bios-vendor"]
    assert calls[1][0] == ["sudo", "-n", "dmidecode", "--type", "2"]
    env = calls[0][1]
    assert env["LANG"] == "C"
    assert env["LC_MESSAGES"] == "C"
    assert env["LANGUAGE"] == "en"


def test_source_leaves_parent_environment_alone(monkeypatch) -> None:
    monkeypatch.setenv("LANG", "de_DE.UTF-8")
    monkeypatch.setattr(subprocess_util, "capture", lambda cmd, env=None: "")

    dmi.DmidecodeSource(InjectorConfig()).get_string("system-uuid")

    assert os.environ["LANG"] == "de_DE.UTF-8"


def test_capture_wraps_missing_executable() -> None:
    with pytest.raises(CommandError) as excinfo:
        subprocess_util.capture(["definitely-not-a-real-dmidecode-binary"])

    assert excinfo.value.returncode is None
    assert excinfo.value.cmd == ["definitely-not-a-real-dmidecode-binary"]


def test_capture_wraps_failing_command() -> None:
    cmd = [sys.executable, "-c", "import sys; sys.stderr.write('permission denied'); sys.exit(3)"]

    with pytest.raises(CommandError) as excinfo:
        subprocess_util.capture(cmd)

    assert excinfo.value.returncode == 3
    assert "permission denied" in str(excinfo.value)


def test_capture_keeps_non_utf8_bytes() -> None:
    cmd = [sys.executable, "-c", "import sys; sys.stdout.buffer.write(b'Acme \\xa9 Corp\\n')"]

    output = subprocess_util.capture(cmd)

    assert output == "Acme \udca9 Corp\n"
    assert os.fsencode(output.strip()) == b"Acme \xa9 Corp"
