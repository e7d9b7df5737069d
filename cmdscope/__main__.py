"""
cmdscope

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import asyncio
import logging
import os
from argparse import ArgumentParser
from pathlib import Path
from typing import Any

from cmdscope.buffer import parse
from cmdscope.config import CmdScopeConfig, loader
from cmdscope.console import console
from cmdscope.debug import render_model
from cmdscope.prompt import CommandPrompt
from cmdscope.utils import setup_logging


def find_cmdscope_config() -> Path | None:
    candidates = [
        Path.cwd() / "cmdscope.yaml",
        Path.cwd() / "cmdscope.toml",
        Path(os.environ.get("CMDSCOPE_CONFIG", "cmdscope.yaml")),
        Path.home() / ".config" / "cmdscope" / "cmdscope.yaml",
        Path.home() / ".config" / "cmdscope" / "cmdscope.toml",
    ]
    return next((p for p in candidates if p.exists()), None)


def get_root_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="cmdscope",
        description="Interactive multi-command line inspector.",
        epilog="Lines are parsed and displayed, never executed.",
    )
    parser.add_argument("-c", "--config", type=Path, help="Path to a YAML/TOML config.")
    parser.add_argument(
        "--log-mode", choices=["cli", "json"], help="Console logging format."
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to the console."
    )
    return parser


async def run(config: CmdScopeConfig) -> None:
    registry = config.to_registry()
    prompt = CommandPrompt(registry, config.to_history(), message=config.prompt)
    while True:
        try:
            line = await prompt.prompt_async()
        except (EOFError, KeyboardInterrupt):
            console.print("[dim]Bye.")
            return
        if line:
            render_model(parse(line, registry))


def main() -> Any:
    args = get_root_parser().parse_args()
    setup_logging(
        mode=args.log_mode,
        log_filename=None,
        console_log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )
    config_path = args.config or find_cmdscope_config()
    config = loader(config_path) if config_path else CmdScopeConfig()
    return asyncio.run(run(config))


if __name__ == "__main__":
    main()
