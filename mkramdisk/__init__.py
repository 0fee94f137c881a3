#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Create memory-backed volumes on macOS from the command line."""

__version__ = "1.0.0"
