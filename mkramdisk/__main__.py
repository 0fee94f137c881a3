#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from mkramdisk.app import run

run()
