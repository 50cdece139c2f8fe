#!/usr/bin/env python3
"""
nativekit
Command line entry point: call any helper by dotted name with JSON arguments
"""

import sys
import json
import argparse
from pathlib import Path

# Add src directory to Python path
sys.path.insert(0, str(Path(__file__).parent / 'src'))

from host_config import capability_summary, get_config, setup_logging
from object_types import DescriptorError
from repl import REPL, format_result
from stdlib.builtin_functions import call_builtin, get_builtin_functions

def parse_argument(text: str):
    """JSON when it parses, otherwise the raw string"""
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='nativekit helper functions')
    parser.add_argument('name', nargs='?', help='Dotted helper name, e.g. array.union')
    parser.add_argument('args', nargs='*', help='Arguments, parsed as JSON when possible')
    parser.add_argument('--list', action='store_true', help='List available helpers')
    parser.add_argument('--repl', action='store_true', help='Start interactive REPL')
    parser.add_argument('--capabilities', action='store_true', help='Show host configuration')
    parser.add_argument('--log-level', default=None,
                        help='Logging level (DEBUG, INFO, WARNING, ERROR)')
    parser.add_argument('--version', action='version', version='nativekit 1.0.0')
    parser.add_argument('--debug', action='store_true', help='Enable debug mode')
    return parser

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = 'DEBUG' if args.debug else (args.log_level or get_config().log_level)
    setup_logging(level)

    if args.list:
        for name in sorted(get_builtin_functions()):
            print(name)
        return 0

    if args.capabilities:
        print(json.dumps(capability_summary(), indent=2))
        return 0

    if args.repl or not args.name:
        repl = REPL(debug=args.debug)
        repl.run()
        return 0

    try:
        result = call_builtin(args.name, [parse_argument(arg) for arg in args.args])
    except KeyError as e:
        print(f"Error: {e.args[0] if e.args else e}")
        return 1
    except DescriptorError as e:
        print(f"Descriptor Error: {e.message}")
        return 1
    except (TypeError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    print(format_result(result))
    return 0

if __name__ == '__main__':
    sys.exit(main())
