#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Licensed to the Apache Software Foundation (ASF) under one
# or more contributor license agreements.  See the NOTICE file
# distributed with this work for additional information
# regarding copyright ownership.  The ASF licenses this file
# to you under the Apache License, Version 2.0 (the
# "License"); you may not use this file except in compliance
# with the License.  You may obtain a copy of the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing,
# software distributed under the License is distributed on an
# "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY
# KIND, either express or implied.  See the License for the
# specific language governing permissions and limitations
# under the License.
"""
mkramdisk command-line entry point.

Creates a RAM disk on macOS with the requested size, filesystem and name:

    mkramdisk [OPTIONS] <size> [name]

Exit status is 0 on success (or --help) and 1 on any failure.
"""
from __future__ import annotations

import logging
import sys
from typing import List, Optional

import typer

from mkramdisk.cli import CLICommands
from mkramdisk.config import ConfigManager
from mkramdisk.errors import ConfigError
from mkramdisk.utils.validation import fail

logger = logging.getLogger("mkramdisk")

EXAMPLES = """\b
Examples:
    mkramdisk 1G                    # 1GB APFS RAM disk named "RAMDisk"
    mkramdisk 512M MyRAM            # 512MB APFS RAM disk named "MyRAM"
    mkramdisk -f hfs+ 2G TempDisk   # 2GB HFS+ RAM disk named "TempDisk"
    mkramdisk --format fat32 256M   # 256MB FAT32 RAM disk
"""

# typer may bundle its own copy of click, so the exception classes come from typer.
UsageError = next(c for c in typer.BadParameter.__mro__ if c.__name__ == "UsageError")

cli = typer.Typer(
    add_completion=False,
    rich_markup_mode=None,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _apply_logging(verbose: bool, level: str = "INFO") -> None:
    """Route diagnostics to stderr when verbose, otherwise keep the logger quiet."""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    if not verbose:
        logger.setLevel(logging.WARNING)
        return
    level_no = getattr(logging, level.upper(), None)
    logger.setLevel(level_no if isinstance(level_no, int) else logging.INFO)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.addHandler(handler)


@cli.command(epilog=EXAMPLES)
def create(
    ctx: typer.Context,
    size: str = typer.Argument(..., help="Size of RAM disk (e.g. 1G, 512M, 2048K); suffixes K/KB, M/MB, G/GB, T/TB"),
    name: Optional[str] = typer.Argument(None, help="Name for the RAM disk [default: RAMDisk]"),
    filesystem: Optional[str] = typer.Option(
        None, "-f", "--format", metavar="FS", help="Filesystem format: apfs, hfs+, fat32, exfat [default: apfs]"
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Show detailed output"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
):
    """Create a RAM disk on macOS with specified size and optional name."""
    if not size.strip():
        raise typer.BadParameter("Size argument is required", ctx=ctx, param_hint="'SIZE'")
    try:
        agent_config = ConfigManager().load()
    except ConfigError as e:
        fail(str(e))
    _apply_logging(verbose, agent_config.logging.level)
    CLICommands(agent_config).create(size, name=name, filesystem=filesystem, verbose=verbose, as_json=as_json)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return the process exit status."""
    try:
        rv = cli(args=argv, prog_name="mkramdisk", standalone_mode=False)
    except UsageError as e:
        typer.echo(f"Error: {e.format_message()}", err=True)
        if e.ctx is not None:
            typer.echo(e.ctx.get_usage(), err=True)
            typer.echo(f"Try '{e.ctx.command_path} -h' for help.", err=True)
        return 1
    except typer.Abort:
        typer.echo("Aborted!", err=True)
        return 1
    return rv if isinstance(rv, int) else 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
