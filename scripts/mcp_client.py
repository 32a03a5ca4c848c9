"""Utility script to exercise the pk-engine FastMCP server.

Usage:
    python scripts/mcp_client.py --tool query text="counterteam for Roxanne"
    python scripts/mcp_client.py --tool set_badge_count count:=4
    python scripts/mcp_client.py --list

Without ``--server`` the script spawns ``python -m pk_engine.server`` over
stdio; pass an MCP endpoint URL to talk to a running HTTP server instead.
Parameters are ``key=value`` strings or ``key:=<json>`` for typed values.
"""
from __future__ import annotations

import argparse
import asyncio
import json
import sys
from collections.abc import Mapping, Sequence
from dataclasses import asdict, is_dataclass
from typing import Any

from fastmcp import Client
from fastmcp.client.transports import StdioTransport


def _parse_param(arg: str) -> tuple[str, Any]:
    if ":=" in arg:
        key, raw = arg.split(":=", 1)
        try:
            return key, json.loads(raw)
        except json.JSONDecodeError as exc:
            raise argparse.ArgumentTypeError(f"Invalid JSON for {key}: {exc}") from exc
    if "=" in arg:
        key, value = arg.split("=", 1)
        return key, value
    raise argparse.ArgumentTypeError("Parameters must be in key=value or key:=json format")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument(
        "--server",
        help="MCP endpoint URL (default: spawn the local server over stdio)",
    )
    parser.add_argument(
        "--tool",
        default="query",
        help="Tool name to invoke (use --list to inspect options)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available tools instead of calling one",
    )
    parser.add_argument(
        "params",
        nargs="*",
        type=_parse_param,
        help="Tool parameters as key=value or key:=json",
    )
    return parser


def _coerce(value: Any) -> Any:
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if isinstance(value, Mapping):
        return {k: _coerce(v) for k, v in value.items()}
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return [_coerce(item) for item in value]
    if is_dataclass(value):
        return _coerce(asdict(value))
    method = getattr(value, "model_dump", None)
    if callable(method):
        return _coerce(method())
    return str(value)


async def _list_tools(client: Client) -> None:
    for tool in await client.list_tools():
        print(f"- {tool.name}: {tool.description or ''}")


async def _call_tool(client: Client, tool: str, params: dict[str, Any]) -> None:
    result = await client.call_tool(tool, params)
    print(json.dumps(_coerce(result), indent=2, ensure_ascii=False))


async def _main_async() -> None:
    args = _build_parser().parse_args()

    target = args.server or StdioTransport(command=sys.executable, args=["-m", "pk_engine.server"])
    async with Client(target) as client:
        await client.ping()
        if args.list:
            await _list_tools(client)
            return
        await _call_tool(client, args.tool, dict(args.params))


def main() -> None:
    asyncio.run(_main_async())


if __name__ == "__main__":
    main()
