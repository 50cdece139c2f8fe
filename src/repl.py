"""
nativekit REPL
Interactive loop that calls registered helpers with JSON arguments
"""

import json
import logging
from typing import Any, List, Optional, Tuple

from object_types import DescriptorError, PropertyDescriptor, ProtoObject
from stdlib.builtin_functions import call_builtin, get_builtin_functions

logger = logging.getLogger('nativekit.repl')

class CallSyntaxError(ValueError):
    """A REPL line could not be read as `name arg, arg, ...`"""
    pass

def _json_default(value: Any) -> Any:
    if isinstance(value, PropertyDescriptor):
        return value.to_dict()
    if isinstance(value, ProtoObject):
        return dict(vars(value))
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    return repr(value)

def format_result(result: Any) -> str:
    """Render a result the way the REPL and CLI print it"""
    if result is None:
        return "null"
    if isinstance(result, bool):
        return "true" if result else "false"
    if isinstance(result, str):
        return result
    if isinstance(result, (list, dict, PropertyDescriptor, ProtoObject)):
        return json.dumps(result, default=_json_default)
    return str(result)

def parse_call(line: str) -> Tuple[str, List[Any]]:
    """Split `array.range 1, 5, 2` into ('array.range', [1, 5, 2])"""
    text = line.strip()
    if not text:
        raise CallSyntaxError("Empty input")
    name, _, rest = text.partition(' ')
    rest = rest.strip()
    if not rest:
        return name, []
    try:
        args = json.loads('[' + rest + ']')
    except json.JSONDecodeError as e:
        raise CallSyntaxError(f"Invalid arguments: {e.msg}") from e
    return name, args

def _unbalanced(text: str) -> int:
    depth = 0
    in_string = False
    escaped = False
    for char in text:
        if in_string:
            if escaped:
                escaped = False
            elif char == '\\':
                escaped = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif char in '[{':
            depth += 1
        elif char in ']}':
            depth -= 1
    return depth + (1 if in_string else 0)

class REPL:
    def __init__(self, debug: bool = False):
        self.debug = debug
        self.builtins = get_builtin_functions()
        self.multiline_input = ""
        self.prompt = "nativekit> "
        self.continuation_prompt = "...        "

    def run(self):
        """Start the REPL"""
        print("nativekit 1.0.0")
        print("Type 'help' for help, 'exit' to quit.")
        print()

        while True:
            try:
                if self.multiline_input:
                    line = input(self.continuation_prompt)
                else:
                    line = input(self.prompt)

                if not self.multiline_input and self.handle_command(line.strip()):
                    if line.strip() in ('exit', 'quit'):
                        break
                    continue

                self.multiline_input += line + "\n"

                if self.is_complete_input(self.multiline_input):
                    self.evaluate_input(self.multiline_input.strip())
                    self.multiline_input = ""

            except KeyboardInterrupt:
                print("\nKeyboardInterrupt")
                self.multiline_input = ""
            except EOFError:
                print("\nGoodbye!")
                break

    def handle_command(self, command: str) -> bool:
        """Run a REPL command; False when the line is a helper call"""
        if command in ('exit', 'quit'):
            print("Goodbye!")
        elif command == 'help':
            self.show_help()
        elif command == 'clear':
            print("\033[2J\033[H")
        elif command == 'list' or command.startswith('list '):
            prefix = command[len('list'):].strip()
            for name in sorted(self.builtins):
                if name.startswith(prefix):
                    print(name)
        elif command.startswith('debug'):
            parts = command.split()
            if len(parts) > 1 and parts[1] in ['on', 'off']:
                self.debug = parts[1] == 'on'
                logging.getLogger('nativekit').setLevel(
                    logging.DEBUG if self.debug else logging.WARNING)
                print(f"Debug mode {'enabled' if self.debug else 'disabled'}")
            else:
                print(f"Debug mode is {'enabled' if self.debug else 'disabled'}")
        else:
            return False
        return True

    def is_complete_input(self, input_text: str) -> bool:
        """More input is needed while brackets or a string are still open"""
        return _unbalanced(input_text) <= 0

    def evaluate_input(self, input_text: str) -> Optional[Any]:
        """Evaluate one call and print the result"""
        logger.debug("Evaluating %r", input_text)
        try:
            name, args = parse_call(input_text)
            if self.debug:
                print(f"Call: {name}({', '.join(repr(arg) for arg in args)})")
            result = call_builtin(name, args)
        except CallSyntaxError as e:
            print(f"Syntax Error: {e}")
            return None
        except KeyError as e:
            print(f"Error: {e.args[0] if e.args else e}")
            return None
        except DescriptorError as e:
            print(f"Descriptor Error: {e.message}")
            return None
        except (TypeError, ValueError) as e:
            print(f"Error: {e}")
            return None

        print(format_result(result))
        return result

    def show_help(self):
        """Show help information"""
        help_text = """
nativekit REPL Help

Commands:
  help          - Show this help
  exit, quit    - Exit the REPL
  clear         - Clear the screen
  list [prefix] - List helpers, optionally only those starting with prefix
  debug on/off  - Enable/disable debug logging

Calls:
  <name> <arg>, <arg>, ...

  Arguments are JSON values separated by commas. Brackets may span lines.

Examples:
  nativekit> array.range 1, 5, 2
  [1, 3, 5]
  nativekit> string.soundex "Robert"
  R163
  nativekit> object.merge [{"a": 1}, {"b": 2}]
  {"a": 1, "b": 2}
  nativekit> number.abbr 1500, 1
  1.5k
"""
        print(help_text)
