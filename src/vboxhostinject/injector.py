"""Copy host DMI data into a VM's firmware configuration."""
from __future__ import annotations

import logging
from typing import Optional, Tuple

from .config import DEFAULT_NAMESPACE
from .collectors.dmi import HardwareInfoSource, record_value, revision_value, split_revision
from .dmi_types import BOARD_TYPES, CHASSIS_TYPES
from .model import DmiField, FirmwareType, InjectionResult, RevisionPart
from .vbox import VMConfigSink

LOGGER = logging.getLogger(__name__)

# VirtualBox ships its own OEM strings; the host ones have no extra-data key
OEM_PLACEHOLDER = "OEM String"

FIELDS: Tuple[DmiField, ...] = (
    # BIOS information (type 0)
    DmiField("DmiBIOSVendor", string="bios-vendor"),
    DmiField("DmiBIOSVersion", string="bios-version"),
    DmiField("DmiBIOSReleaseDate", string="bios-release-date"),
    DmiField("DmiBIOSReleaseMajor", record_type=0, label="BIOS Revision", revision=RevisionPart.MAJOR),
    DmiField("DmiBIOSReleaseMinor", record_type=0, label="BIOS Revision", revision=RevisionPart.MINOR),
    DmiField("DmiBIOSFirmwareMajor", record_type=0, label="Firmware Revision", revision=RevisionPart.MAJOR),
    DmiField("DmiBIOSFirmwareMinor", record_type=0, label="Firmware Revision", revision=RevisionPart.MINOR),
    # System information (type 1)
    DmiField("DmiSystemVendor", string="system-manufacturer"),
    DmiField("DmiSystemProduct", string="system-product-name"),
    DmiField("DmiSystemVersion", string="system-version"),
    DmiField("DmiSystemSerial", string="system-serial-number"),
    DmiField("DmiSystemSKU", record_type=1, label="SKU Number"),
    DmiField("DmiSystemFamily", record_type=1, label="Family"),
    DmiField("DmiSystemUuid", string="system-uuid"),
    # Board information (type 2)
    DmiField("DmiBoardVendor", string="baseboard-manufacturer"),
    DmiField("DmiBoardProduct", string="baseboard-product-name"),
    DmiField("DmiBoardVersion", string="baseboard-version"),
    DmiField("DmiBoardSerial", string="baseboard-serial-number"),
    DmiField("DmiBoardAssetTag", string="baseboard-asset-tag"),
    DmiField("DmiBoardLocInChass", record_type=2, label="Location In Chassis"),
    DmiField("DmiBoardBoardType", record_type=2, label="Type", table=BOARD_TYPES),
    # System enclosure or chassis (type 3)
    DmiField("DmiChassisVendor", string="chassis-manufacturer"),
    DmiField("DmiChassisType", string="chassis-type", table=CHASSIS_TYPES),
    DmiField("DmiChassisVersion", string="chassis-version"),
    DmiField("DmiChassisSerial", string="chassis-serial-number"),
    DmiField("DmiChassisAssetTag", string="chassis-asset-tag"),
    # Processor information (type 4)
    DmiField("DmiProcManufacturer", string="processor-manufacturer"),
    DmiField("DmiProcVersion", string="processor-version"),
    # OEM strings (type 11)
    DmiField("DmiOEMVBoxVer", literal=OEM_PLACEHOLDER),
    DmiField("DmiOEMVBoxRev", literal=OEM_PLACEHOLDER),
)


def config_key(firmware: FirmwareType, name: str, namespace: str = DEFAULT_NAMESPACE) -> str:
    return f"{namespace}/{firmware.segment}/0/Config/{name}"


def resolve_field(dmi_field: DmiField, source: HardwareInfoSource) -> Optional[str]:
    """Return the value to write for ``dmi_field``, or None when it cannot be mapped."""
    if dmi_field.literal is not None:
        return dmi_field.literal

    if dmi_field.string is not None:
        raw = source.get_string(dmi_field.string)
    else:
        assert dmi_field.record_type is not None and dmi_field.label is not None
        dump = source.dump_type(dmi_field.record_type)
        if dmi_field.revision is not None:
            raw = split_revision(revision_value(dump, dmi_field.label))[dmi_field.revision]
        else:
            raw = record_value(dump, dmi_field.label)

    if dmi_field.table is not None:
        code = dmi_field.table.get(raw)
        if code is None:
            LOGGER.warning("Unknown %s label %r, leaving the VM default in place", dmi_field.name, raw)
            return None
        return str(code)

    if not dmi_field.numeric and raw.isdigit():
        # otherwise VirtualBox reads the value as an integer
        return "string:" + raw
    return raw


def inject_host_info(
    vm_name: str,
    firmware: FirmwareType,
    source: HardwareInfoSource,
    sink: VMConfigSink,
    *,
    namespace: str = DEFAULT_NAMESPACE,
) -> InjectionResult:
    """Write every host DMI field into the VM's extra-data.

    Each key is written as soon as its value is known; a failure part way
    through leaves the keys already written in place.
    """
    result = InjectionResult(vm_name=vm_name)
    for dmi_field in FIELDS:
        value = resolve_field(dmi_field, source)
        if value is None:
            result.skipped.append(dmi_field.name)
            continue
        key = config_key(firmware, dmi_field.name, namespace)
        LOGGER.debug("Setting %s = %r", key, value)
        sink.set_extra_data(vm_name, key, value)
        result.written.append(dmi_field.name)
    return result
