"""Main entry point for the typed reflection tools."""

import argparse
import importlib
import sys
from pathlib import Path
from typing import Any, NoReturn, Optional

from .domain.models.reflection import ReflectionError, type_display_name
from .domain.services.reflection import MemberIntrospector, Reflector
from .infrastructure.config import Config
from .infrastructure.logging import LoggerSetup, get_logger, log_timing
from .infrastructure.repositories import ModPageRepository


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="typed-reflection",
        description="Inspect and read private members of Python types, "
        "and look up mod metadata from a mod site",
        epilog="""
Examples:
  # List the members of a class, including private ones
  typed-reflection inspect collections:OrderedDict

  # Read a static (class-level) private member
  typed-reflection get logging:Logger manager

  # Fetch mod metadata (several IDs at once)
  typed-reflection --verbose modinfo 4250 4251

  # Using .env file for configuration
  echo 'MOD_SITE_BASE_URL=https://example.org' > .env
  typed-reflection modinfo 4250
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output with debug logs",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        help="Also write debug logs to a timestamped file in this directory",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    inspect_parser = subparsers.add_parser("inspect", help="List the members of a type")
    inspect_parser.add_argument("target", help="Type to inspect, as 'module:QualifiedName'")

    get_parser = subparsers.add_parser("get", help="Print the value of a static member")
    get_parser.add_argument("target", help="Declaring type, as 'module:QualifiedName'")
    get_parser.add_argument("member", help="Member name as declared (e.g. '__registry')")

    modinfo_parser = subparsers.add_parser("modinfo", help="Fetch mod metadata by mod ID")
    modinfo_parser.add_argument("mod_ids", nargs="+", metavar="ID", help="Mod ID(s) to look up")

    return parser.parse_args(argv)


def load_type(target: str) -> type:
    """
    Import a type from a 'module:QualifiedName' reference.

    Raises:
        ValueError: If the reference is malformed or doesn't name a type
    """
    module_name, sep, qualname = target.partition(":")
    if not sep or not module_name or not qualname:
        raise ValueError(f"Expected 'module:QualifiedName', got '{target}'")

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise ValueError(f"Can't import module '{module_name}': {e}") from e

    for part in qualname.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise ValueError(f"'{module_name}' has no attribute '{qualname}'") from e

    if not isinstance(obj, type):
        raise ValueError(f"'{target}' is not a type")
    return obj


def inspect_command(target: str) -> int:
    """Print the members the introspector finds on a type."""
    logger = get_logger(__name__)
    cls = load_type(target)
    introspector = MemberIntrospector()

    count = 0
    for descriptor in introspector.iter_members(cls):
        scope = "static" if descriptor.is_static else "instance"
        print(
            f"{descriptor.kind.label:<8} {scope:<8} {descriptor.display_name}: "
            f"{type_display_name(descriptor.value_type)}"
        )
        count += 1

    logger.info(f"Found {count} member(s) on {target}")
    return 0


def get_command(target: str, member: str) -> int:
    """Print the value of a static field or property."""
    cls = load_type(target)
    print(repr(Reflector().get_value(cls, member)))
    return 0


def modinfo_command(config: Config, mod_ids: list[str]) -> int:
    """Fetch and print mod metadata, returning 1 if any lookup failed."""
    logger = get_logger(__name__)
    failed: list[tuple[str, str]] = []

    with ModPageRepository(
        vendor_key=config.mod_site_vendor_key,
        user_agent=config.user_agent,
        base_url=config.mod_site_base_url,
        mod_page_url_format=config.mod_site_page_format,
        timeout=config.http_timeout,
    ) as repository:
        for i, mod_id in enumerate(mod_ids, 1):
            logger.info(f"[{i}/{len(mod_ids)}] Looking up: {mod_id}")
            info = repository.get_mod_info(mod_id)
            if info.has_error:
                logger.error(f"[FAILED] {mod_id}: {info.error.strip().splitlines()[-1]}")
                logger.debug(info.error)
                failed.append((mod_id, info.error))
                continue
            print(f"{mod_id}\t{info.name}\t{info.version or '?'}\t{info.url}")

    if len(mod_ids) > 1:
        logger.info(f"Looked up {len(mod_ids)} mod(s): {len(mod_ids) - len(failed)} found, "
                    f"{len(failed)} failed")
    return 0 if not failed else 1


@log_timing
def main(argv: Optional[list[str]] = None) -> NoReturn:
    """Main entry point for the typed reflection command-line tool."""
    args = parse_args(argv)

    # Load configuration
    try:
        config = Config.from_args(verbose=args.verbose or None, log_dir=args.log_dir)
        config.validate()
    except Exception as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    # Initialize logging
    config.ensure_log_dir()
    LoggerSetup.initialize(config.log_dir, verbose=config.verbose)
    logger = get_logger(__name__)
    logger.debug(f"Command: {args.command}")

    try:
        if args.command == "inspect":
            exit_code = inspect_command(args.target)
        elif args.command == "get":
            exit_code = get_command(args.target, args.member)
        else:
            exit_code = modinfo_command(config, args.mod_ids)
    except (ValueError, ReflectionError) as e:
        logger.error(str(e))
        exit_code = 1

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
