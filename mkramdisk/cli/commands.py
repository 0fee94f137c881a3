#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
CLI commands module for mkramdisk.
This module contains the command handler that turns CLI input into a mounted RAM disk.
"""
import logging
from typing import Optional

import typer

from mkramdisk.backend.storage import get_backend
from mkramdisk.config import AgentConfig
from mkramdisk.errors import RamDiskError
from mkramdisk.models import ProvisionReport
from mkramdisk.orchestration import RamDiskProvisioner
from mkramdisk.utils.validation import build_config, fail

logger = logging.getLogger("mkramdisk")


def render_report(report: ProvisionReport, as_json: bool = False) -> None:
    """Print the success report on stdout."""
    if as_json:
        typer.echo(report.model_dump_json())
        return
    typer.secho("RAM disk created successfully", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Device:      {report.device}")
    typer.echo(f"  Size:        {report.size}")
    typer.echo(f"  Sectors:     {report.sectors}")
    typer.echo(f"  Filesystem:  {report.filesystem}")
    typer.echo(f"  Mount point: {report.mount_point}")
    typer.echo(f"  Name:        {report.name}")
    typer.echo("")
    typer.echo("To unmount: " + typer.style(report.unmount_command, bold=True))
    typer.echo("To eject:   " + typer.style(report.detach_command, bold=True))


class CLICommands:
    """CLI commands handler."""

    def __init__(self, agent_config: AgentConfig):
        self.agent_config = agent_config

    def create(
        self,
        size: str,
        name: Optional[str] = None,
        filesystem: Optional[str] = None,
        verbose: bool = False,
        as_json: bool = False,
    ) -> ProvisionReport:
        """Create, format and mount a RAM disk, then print the report."""
        defaults = self.agent_config.defaults
        try:
            config = build_config(
                size,
                name=defaults.name if name is None else name,
                filesystem=filesystem or defaults.filesystem,
                verbose=verbose,
            )
            provisioner = RamDiskProvisioner(
                get_backend(verbose=verbose),
                volumes_root=self.agent_config.volumes_root,
                mount_wait=self.agent_config.mount_wait_budget(),
            )
            report = provisioner.provision(config)
        except RamDiskError as e:
            fail(str(e))
        render_report(report, as_json=as_json)
        return report
