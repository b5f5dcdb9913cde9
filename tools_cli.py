#!/usr/bin/env python3
"""
Tools CLI for the Sheeter API MCP Server

This script calls the spreadsheet tools directly, without the MCP protocol.
Arguments go through the same validation and formatting as MCP calls.

Usage:
    python tools_cli.py --list
    python tools_cli.py --info read_sheet
    python tools_cli.py --tool read_sheet --sheetId "abc123" --range "A1:D10"
    python tools_cli.py --tool write_sheet --args '{"sheetId": "abc123", "range": "A1", "values": [["x"]]}'
    python tools_cli.py --interactive
"""
import argparse
import asyncio
import json
import logging
import os
import sys
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

# Load environment variables
dotenv_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), '.env')
load_dotenv(dotenv_path=dotenv_path)

# Configure logging - use WARNING to reduce noise
logging.basicConfig(
    level=os.getenv('LOG_LEVEL', 'WARNING'),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

from core.api_client import SheeterClient  # noqa: E402
from core.config import load_config  # noqa: E402
from core.results import ToolOutcome  # noqa: E402
from gsheets.catalog import TOOL_CATALOG, get_tool  # noqa: E402
from gsheets.dispatcher import call_tool  # noqa: E402


def convert_value(value: Any, expected_type: Optional[str] = None) -> Any:
    """
    Decode a command-line value as JSON when possible, otherwise keep the string.

    Values for string-typed parameters are never decoded, so a numeric
    spreadsheet ID stays a string.
    """
    if not isinstance(value, str) or expected_type == "string":
        return value
    try:
        return json.loads(value)
    except json.JSONDecodeError:
        return value


def parse_tool_kwargs(unknown: List[str], schema: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Turn leftover '--name value' pairs into a tool argument mapping."""
    properties = (schema or {}).get("properties", {})
    kwargs = {}
    i = 0
    while i < len(unknown):
        arg = unknown[i]
        if arg.startswith('--'):
            param_name = arg[2:]
            if i + 1 < len(unknown) and not unknown[i + 1].startswith('--'):
                expected_type = properties.get(param_name, {}).get("type")
                kwargs[param_name] = convert_value(unknown[i + 1], expected_type)
                i += 2
            else:
                kwargs[param_name] = True
                i += 1
        else:
            i += 1
    return kwargs


class ToolTester:
    """Helper class to call Sheeter tools directly."""

    def __init__(self, client: SheeterClient):
        self.client = client

    def list_tools(self) -> None:
        """Print all available tools."""
        print("\nAvailable Tools:")
        print("=" * 60)
        for tool in TOOL_CATALOG:
            print(f"  • {tool.name}")
            print(f"    {tool.description}")
            print()

    def get_tool_info(self, tool_name: str) -> bool:
        """Print the parameters of a tool. Returns False if the tool does not exist."""
        tool = get_tool(tool_name)
        if tool is None:
            print(f"Tool '{tool_name}' not found.")
            return False

        schema = tool.input_schema
        required = schema.get("required", [])
        print(f"\nTool: {tool.name}")
        print("=" * 60)
        print(f"Description: {tool.description}")
        print("\nParameters:")
        for param_name, param in schema.get("properties", {}).items():
            req = "required" if param_name in required else "optional"
            default = f" = {param['default']!r}" if "default" in param else ""
            allowed = f" one of {param['enum']}" if "enum" in param else ""
            print(f"  • {param_name} ({req}){default}{allowed}")
        print()
        return True

    async def call_tool(self, tool_name: str, arguments: Dict[str, Any]) -> ToolOutcome:
        """Call a tool and print its output."""
        print(f"\nCalling tool: {tool_name}")
        print(f"   Parameters: {arguments}")
        print("=" * 60)

        outcome = await call_tool(self.client, tool_name, arguments)

        print("\nError:" if outcome.is_error else "\nResult:")
        print("-" * 60)
        print(outcome.text)
        print("-" * 60)
        return outcome


def interactive_mode(tester: ToolTester):
    """Run an interactive REPL for testing tools."""
    print("\nInteractive Test Mode")
    print("=" * 60)
    print("Commands:")
    print("  list              - List all available tools")
    print("  info <tool_name>  - Get detailed info about a tool")
    print("  call <tool_name>  - Call a tool (will prompt for parameters)")
    print("  quit              - Exit interactive mode")
    print("=" * 60)

    while True:
        try:
            cmd = input("\n> ").strip()

            if not cmd:
                continue

            if cmd == "quit":
                break

            if cmd == "list":
                tester.list_tools()
                continue

            if cmd.startswith("info "):
                tester.get_tool_info(cmd[5:].strip())
                continue

            if cmd.startswith("call "):
                tool_name = cmd[5:].strip()
                if not tester.get_tool_info(tool_name):
                    continue

                print("\nEnter parameters (press Enter to skip optional parameters):")
                schema = get_tool(tool_name).input_schema
                kwargs = {}
                for param_name, param in schema.get("properties", {}).items():
                    suffix = "required" if param_name in schema.get("required", []) else "optional"
                    value = input(f"  {param_name} ({suffix}): ")
                    if value:
                        kwargs[param_name] = convert_value(value, param.get("type"))

                asyncio.run(tester.call_tool(tool_name, kwargs))
            else:
                print("Unknown command. Try 'list', 'info <tool>', 'call <tool>', or 'quit'")

        except KeyboardInterrupt:
            break


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="CLI for Sheeter spreadsheet tools",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument('--interactive', '-i', action='store_true',
                        help='Run in interactive REPL mode')
    parser.add_argument('--list', '-l', action='store_true',
                        help='List all available tools')
    parser.add_argument('--tool', '-t', type=str,
                        help='Tool name to call')
    parser.add_argument('--info', type=str,
                        help='Show detailed info about a tool')
    parser.add_argument('--args', type=str,
                        help='Tool arguments as a JSON object')
    parser.add_argument('--api-key', type=str,
                        help='Sheeter API key (can also be set via SHEETER_API_KEY env var)')
    parser.add_argument('--base-url', type=str,
                        help='Sheeter API base URL (can also be set via SHEETER_BASE_URL env var)')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable verbose logging')

    # Allow arbitrary additional arguments for tool parameters
    args, unknown = parser.parse_known_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.INFO)

    config = load_config(api_key=args.api_key, base_url=args.base_url)
    tester = ToolTester(SheeterClient(config))

    if args.list:
        tester.list_tools()
        return 0

    if args.info:
        return 0 if tester.get_tool_info(args.info) else 1

    if args.interactive:
        interactive_mode(tester)
        return 0

    if args.tool:
        tool = get_tool(args.tool)
        tool_kwargs = json.loads(args.args) if args.args else {}
        tool_kwargs.update(parse_tool_kwargs(unknown, tool.input_schema if tool else None))
        outcome = asyncio.run(tester.call_tool(args.tool, tool_kwargs))
        return 1 if outcome.is_error else 0

    # No action specified, show help
    parser.print_help()
    print("\nQuick start:")
    print("  python tools_cli.py --list                              # List all tools")
    print("  python tools_cli.py --info read_sheet                   # Get tool info")
    print("  python tools_cli.py --interactive                       # Interactive mode")
    print("  python tools_cli.py --tool get_sheet_metadata --sheetId abc123")
    return 0


if __name__ == "__main__":
    sys.exit(main())
