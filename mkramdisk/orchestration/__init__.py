#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Orchestration module for RAM disk provisioning
from .provisioner import ProvisionRun, RamDiskProvisioner, Stage

__all__ = ["RamDiskProvisioner", "ProvisionRun", "Stage"]
