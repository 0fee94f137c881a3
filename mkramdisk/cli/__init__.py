#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from .commands import CLICommands, render_report

__all__ = ["CLICommands", "render_report"]
