"""Typed data models shared by the detector, sources and sinks."""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from .errors import UnsupportedFirmwareError


class FirmwareType(enum.Enum):
    BIOS = "bios"
    UEFI = "uefi"

    @classmethod
    def from_vbox(cls, value: Optional[str]) -> "FirmwareType":
        """Map the ``firmware=`` value reported by VBoxManage."""
        if value == "BIOS":
            return cls.BIOS
        if value == "EFI":
            return cls.UEFI
        raise UnsupportedFirmwareError(value)

    @property
    def segment(self) -> str:
        """Device name used in the extra-data key path."""
        return "pcbios" if self is FirmwareType.BIOS else "efi"


class RevisionPart(enum.IntEnum):
    MAJOR = 0
    MINOR = 1


@dataclass(frozen=True)
class DmiField:
    """One firmware config key and where its value comes from.

    Exactly one of ``string``, ``record_type`` or ``literal`` is set. Record
    fields read the line carrying ``label`` from a full ``dmidecode --type``
    dump; ``revision`` picks one half of a ``major.minor`` value and ``table``
    turns a label into its numeric code.
    """

    name: str
    string: Optional[str] = None
    record_type: Optional[int] = None
    label: Optional[str] = None
    revision: Optional[RevisionPart] = None
    table: Optional[Mapping[str, int]] = None
    literal: Optional[str] = None

    @property
    def numeric(self) -> bool:
        return self.revision is not None or self.table is not None


@dataclass
class InjectionResult:
    vm_name: str
    written: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
