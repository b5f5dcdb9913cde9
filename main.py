#!/usr/bin/env python3
"""
Sheeter API MCP Server

Usage:
    python main.py                                   # stdio transport (default)
    python main.py --transport streamable-http --port 8000
"""
import argparse
import logging
import os
import sys

from dotenv import load_dotenv

dotenv_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), ".env")
load_dotenv(dotenv_path=dotenv_path)

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sheeter API MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "streamable-http"],
        default=os.getenv("MCP_TRANSPORT", "stdio"),
        help="Transport protocol to serve MCP over (default: stdio)",
    )
    parser.add_argument(
        "--host",
        default=os.getenv("HOST", "0.0.0.0"),
        help="Bind address for streamable-http",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("PORT", "8000")),
        help="Port for streamable-http",
    )
    parser.add_argument(
        "--api-key",
        help="Sheeter API key (can also be set via SHEETER_API_KEY env var)",
    )
    parser.add_argument(
        "--base-url",
        help="Sheeter API base URL (can also be set via SHEETER_BASE_URL env var)",
    )
    return parser


def main():
    args = build_parser().parse_args()

    from core.api_client import SheeterClient
    from core.config import load_config
    from core.server import register_sheet_tools, server, set_transport_mode

    config = load_config(api_key=args.api_key, base_url=args.base_url)
    if not config.api_key:
        logger.warning(
            "SHEETER_API_KEY is not set; every API call will be rejected by the server"
        )
    logger.info(f"Sheeter API base URL: {config.base_url}")

    set_transport_mode(args.transport)
    register_sheet_tools(SheeterClient(config))

    if args.transport == "streamable-http":
        server.run(transport="streamable-http", host=args.host, port=args.port)
    else:
        server.run()


if __name__ == "__main__":
    main()
