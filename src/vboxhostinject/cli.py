"""Command-line interface for injecting host hardware identity into a VirtualBox VM."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn, Optional

from .collectors.dmi import DmidecodeSource
from .config import InjectorConfig
from .dependencies import check_dependencies
from .errors import InjectorError, InvalidArgumentsError
from .injector import inject_host_info
from .model import InjectionResult
from .util.logging import setup_logging
from .vbox import DryRunSink, VBoxManage

LOGGER = logging.getLogger(__name__)


class ArgumentParser(argparse.ArgumentParser):
    """Raises InvalidArgumentsError instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise InvalidArgumentsError(message)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="vbox-host-info-injector",
        description="Emulate the host machine by injecting its DMI information into a VirtualBox VM",
        epilog="Put -- before a VM name that starts with a dash: -- -myvm",
        allow_abbrev=False,
    )
    parser.add_argument("vm_name", nargs="?", help="Name or UUID of the target VM (after -- when it starts with a dash)")
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug output, including every external command executed",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Query the host and the VM but only report the extra-data that would be written",
    )
    return parser


def _invalid_arguments(parser: ArgumentParser, detail: str) -> int:
    print(f"Error: Invalid command-line arguments: {detail}", file=sys.stderr)
    print()
    parser.print_help()
    return 1


def run(vm_name: str, config: InjectorConfig, *, dry_run: bool = False) -> InjectionResult:
    check_dependencies(config)
    vbox = VBoxManage(config)
    firmware = vbox.detect_firmware(vm_name)
    LOGGER.info("Injecting host DMI information into %s (%s firmware)", vm_name, firmware.value)
    sink = DryRunSink() if dry_run else vbox
    return inject_host_info(vm_name, firmware, DmidecodeSource(config), sink, namespace=config.namespace)


def main(argv: Optional[list[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    if not argv:
        parser.print_help()
        return 0

    try:
        args = parser.parse_args(argv)
    except InvalidArgumentsError as exc:
        return _invalid_arguments(parser, str(exc))
    if args.vm_name is None:
        return _invalid_arguments(parser, "a VM name is required")

    setup_logging("DEBUG" if args.debug else "INFO")
    LOGGER.debug("Parsed arguments: %s", args)

    try:
        result = run(args.vm_name, InjectorConfig.from_env(), dry_run=args.dry_run)
    except InjectorError as exc:
        LOGGER.error("%s", exc)
        LOGGER.error("An error occurred and the run was aborted prematurely")
        return 1
    except KeyboardInterrupt:
        LOGGER.error("Received SIGINT, the run was interrupted")
        return 1

    if result.skipped:
        LOGGER.warning("Skipped fields: %s", ", ".join(result.skipped))
    LOGGER.info("Wrote %d extra-data keys to %s", len(result.written), result.vm_name)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
