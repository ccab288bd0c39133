"""
cli_entry.py - CLI Entry Point

Commands:
- removeprefix: remove common filename prefixes per directory
- version
- help
"""

import argparse
import dataclasses
import os
import sys
from pathlib import Path
from typing import List, Optional

from core import AppConfig, configure_logging, display_name, normalize_extensions, parse_list

from .cli_interactive import run_remove_prefix


def print_usage(config: AppConfig, file=None) -> None:
    """Print top-level usage"""
    if file is None:
        file = sys.stdout
    print(f"{config.title} - Batch audio file processing tool v{config.version}\n", file=file)
    print(f"Usage: {config.prog} <command> [options]\n", file=file)
    print("Available commands:", file=file)
    print("  removeprefix     Remove common prefix from filenames", file=file)
    print("  version          Show version information", file=file)
    print("  help             Show help information", file=file)
    print(f"\nUse '{config.prog} <command> -h' for detailed help on a command", file=file)


def create_parser(config: AppConfig) -> argparse.ArgumentParser:
    """Create removeprefix argument parser"""
    parser = argparse.ArgumentParser(
        prog=f"{config.prog} removeprefix",
        description="Recursively traverse directories and remove common prefixes from filenames",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        epilog=f"""
Examples:
  {config.prog} removeprefix -dir /path/to/music -dry-run
  {config.prog} removeprefix -dir /path/to/music -y
  {config.prog} removeprefix -dir /path/to/music -exts mp3,m4a,flac
"""
    )

    parser.add_argument("-dir", "--dir", dest="dir", default=config.default_dir,
                        help="Directory path to process")
    parser.add_argument("-dry-run", "--dry-run", dest="dry_run", action="store_true",
                        help="Preview mode, don't actually rename files")
    parser.add_argument("-y", "--yes", dest="yes", action="store_true",
                        help="Auto-confirm all operations without asking")
    parser.add_argument("-exclude-dirs", "--exclude-dirs", dest="exclude_dirs",
                        default=",".join(config.default_exclude_dirs),
                        help="Comma-separated directory names to skip")
    parser.add_argument("-exts", "--exts", dest="exts",
                        default=",".join(config.default_extensions),
                        help="Comma-separated file extensions to process (empty = all files)")
    parser.add_argument("-separators", "--separators", dest="separators", default=None,
                        help="Characters a prefix may end on (default: '-_ )]】')")

    return parser


def cmd_removeprefix(argv: List[str], config: AppConfig) -> int:
    """Handle removeprefix command"""
    args = create_parser(config).parse_args(argv)

    if args.separators:
        config = dataclasses.replace(
            config,
            prefix=dataclasses.replace(config.prefix, separators=frozenset(args.separators)),
        )

    directory = Path(os.path.abspath(os.path.expanduser(args.dir)))
    try:
        directory.stat()
    except OSError as e:
        print(f"Error: unable to access directory {display_name(str(directory))}: {e}", file=sys.stderr)
        return 1
    if not directory.is_dir():
        print(f"Error: {display_name(str(directory))} is not a directory", file=sys.stderr)
        return 1

    return run_remove_prefix(
        directory,
        dry_run=args.dry_run,
        auto_yes=args.yes,
        exclude_dirs=parse_list(args.exclude_dirs),
        extensions=normalize_extensions(parse_list(args.exts)),
        config=config,
    )


def main(argv: Optional[List[str]] = None, config: Optional[AppConfig] = None) -> int:
    """Main entry point"""
    if argv is None:
        argv = sys.argv[1:]
    if config is None:
        config = AppConfig()

    configure_logging()

    if not argv:
        print_usage(config, file=sys.stderr)
        return 1

    command, rest = argv[0], argv[1:]

    if command == "removeprefix":
        return cmd_removeprefix(rest, config)
    elif command == "version":
        print(f"{config.title} v{config.version}")
        return 0
    elif command in ("help", "-h", "--help"):
        print_usage(config)
        return 0
    else:
        print(f"Error: unknown command '{command}'\n", file=sys.stderr)
        print_usage(config, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
