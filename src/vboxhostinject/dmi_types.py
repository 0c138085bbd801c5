"""DMI enumeration labels as printed by dmidecode 3.1, mapped to their codes."""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

BOARD_TYPE_LABELS = (
    "Unknown",
    "Other",
    "Server Blade",
    "Connectivity Switch",
    "System Management Module",
    "Processor Module",
    "I/O Module",
    "Memory Module",
    "Daughter Board",
    "Motherboard",
    "Processor+Memory Module",
    "Processor+I/O Module",
    "Interconnect Board",
)

CHASSIS_TYPE_LABELS = (
    "Other",
    "Unknown",
    "Desktop",
    "Low Profile Desktop",
    "Pizza Box",
    "Mini Tower",
    "Tower",
    "Portable",
    "Laptop",
    "Notebook",
    "Hand Held",
    "Docking Station",
    "All In One",
    "Sub Notebook",
    "Space-saving",
    "Lunch Box",
    "Main Server Chassis",
    "Expansion Chassis",
    "Sub Chassis",
    "Bus Expansion Chassis",
    "Peripheral Chassis",
    "RAID Chassis",
    "Rack Mount Chassis",
    "Sealed-case PC",
    "Multi-system",
    "CompactPCI",
    "AdvancedTCA",
    "Blade",
    "Blade Enclosing",
    "Tablet",
    "Convertible",
    "Detachable",
    "IoT Gateway",
    "Embedded PC",
    "Mini PC",
    "Stick PC",
)


def _codes(labels: Iterable[str]) -> Mapping[str, int]:
    # codes start from 1
    return MappingProxyType({label: code for code, label in enumerate(labels, start=1)})


BOARD_TYPES = _codes(BOARD_TYPE_LABELS)
CHASSIS_TYPES = _codes(CHASSIS_TYPE_LABELS)
