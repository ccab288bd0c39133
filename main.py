#!/usr/bin/env python3
"""
Audio Tool - Main Entry

Supports:
- CLI mode (default)
- GUI mode (--gui or -g parameter)

Usage:
    python main.py removeprefix -dir ./music -dry-run   # CLI
    python main.py version                              # CLI
    python main.py --gui                                # GUI mode
    python main.py -g                                   # GUI mode
"""

import sys
from pathlib import Path

# Ensure the current directory is in the Python path
sys.path.insert(0, str(Path(__file__).parent))


def main(argv=None):
    """Main entry point"""
    if argv is None:
        argv = sys.argv[1:]

    # Only a leading --gui/-g selects the GUI, later tokens belong to the CLI
    if argv[:1] in (["--gui"], ["-g"]):
        try:
            from gui import main as gui_main
        except ImportError as e:
            print("Error: Unable to start GUI, please ensure PySide6 is installed", file=sys.stderr)
            print(f"Detailed error: {e}", file=sys.stderr)
            print("\nInstall command: pip install PySide6", file=sys.stderr)
            print("\nTo use CLI mode, run:", file=sys.stderr)
            print("    python main.py removeprefix -h", file=sys.stderr)
            return 1
        return gui_main()

    from cli import main as cli_main
    return cli_main(argv)


if __name__ == "__main__":
    sys.exit(main())
