#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from .manager import AgentConfig, ConfigManager

__all__ = ["AgentConfig", "ConfigManager"]
