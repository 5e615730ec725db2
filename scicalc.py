#!/usr/bin/env python3
"""
SciCalc - Scientific keypad calculator

Main entry point for the SciCalc application.
This file serves as a thin wrapper that delegates all functionality
to the scicalc_pkg package.

Usage:
    python scicalc.py                    # Interactive keypad REPL
    python scicalc.py -e "2(3+1)"        # Evaluate expression
    python scicalc.py --help             # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for SciCalc.

    Delegates all functionality to the scicalc_pkg.cli module,
    which handles argument parsing, evaluation, and output formatting.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        from scicalc_pkg.cli import main_entry

        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1
    except ImportError as e:
        print(f"Error: Failed to import scicalc_pkg: {e}")
        print("Please ensure all dependencies are installed: pip install -e .")
        return 1


if __name__ == "__main__":
    sys.exit(main())
