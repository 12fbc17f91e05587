# -*- coding: utf-8 -*-
"""
@author:XuMing(xuming624@qq.com)
@description:
"""
from cmdbuilder.version import __version__
from cmdbuilder.format_command import Separators, quote
from cmdbuilder.tools import Executor, ShellExecutor
from cmdbuilder.command import CommandBuilder, Flag, KeyValue, Positional, PositionalBatch
from cmdbuilder.config import CommandConfig, load_config
