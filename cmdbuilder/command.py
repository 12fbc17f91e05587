# -*- coding: utf-8 -*-
"""
@author:XuMing(xuming624@qq.com)
@description: Command builder, represents one command line command with arguments and parameters
"""
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence, Tuple
from loguru import logger

from cmdbuilder.format_command import Separators, format_command, quote
from cmdbuilder.tools import Executor, ShellExecutor


@dataclass(frozen=True)
class Flag:
    """Argument without value"""
    name: Any


@dataclass(frozen=True)
class KeyValue:
    """Argument with value"""
    name: Any
    value: Any


@dataclass(frozen=True)
class Positional:
    """Single parameter"""
    value: Any


@dataclass(frozen=True)
class PositionalBatch:
    """Several parameters at once"""
    values: Sequence[Any]


class CommandBuilder:
    """
    Command line builder

    One-letter arguments are treated as "short" arguments for the syntax
    purposes, others as "long", see Separators. With default separators:

        cmd = CommandBuilder("jpegoptim")
        cmd.add_argument("p")          # jpegoptim -p
        cmd.add_argument("preserve")   # jpegoptim -p --preserve
        cmd.add_argument("m", 2)       # jpegoptim -p --preserve -m 2
        cmd["max"] = 2                 # jpegoptim -p --preserve -m 2 --max=2
        cmd.add_parameter("file.jpg")  # jpegoptim -p --preserve -m 2 --max=2 file.jpg

    Arguments are appended, so an existing argument with the same name is
    never replaced.
    """

    def __init__(self, command: Any, separators: Optional[Sequence[str]] = None,
                 executor: Optional[Executor] = None):
        """
        Args:
            command: Target command, rendered by str()
            separators: Separators matrix (short prefix, short value separator,
                long prefix, long value separator)
            executor: Runs the rendered command, a ShellExecutor by default
        """
        self.command = command
        self.separators = separators if separators is not None else Separators()
        self.executor = executor if executor is not None else ShellExecutor()
        self._args: List[Tuple[Any, Any]] = []
        self._params: List[Any] = []

    @property
    def separators(self) -> Separators:
        return self._separators

    @separators.setter
    def separators(self, value: Sequence[str]):
        self._separators = Separators(*value)

    @property
    def arguments(self) -> Tuple[Tuple[Any, Any], ...]:
        """Argument pairs in insertion order"""
        return tuple(self._args)

    @property
    def parameters(self) -> Tuple[Any, ...]:
        """Parameters in insertion order"""
        return tuple(self._params)

    def add_argument(self, name: Any, value: Any = None) -> "CommandBuilder":
        """
        Add argument to command

        Args:
            name: Name of the argument
            value: Value of the argument, None for a flag

        Returns:
            self
        """
        self._args.append((name, value))
        return self

    arg = add_argument

    def __setitem__(self, name: Any, value: Any):
        self.add_argument(name, value)

    def get_arguments(self, name: Any) -> Tuple[Tuple[Any, Any], ...]:
        """
        Get argument pairs with the given name

        Args:
            name: Argument name

        Returns:
            Tuple of (name, value) pairs, empty if the name was never added
        """
        return tuple(pair for pair in self._args if pair[0] == name)

    def __getitem__(self, name: Any) -> Tuple[Tuple[Any, Any], ...]:
        return self.get_arguments(name)

    def add_parameter(self, value: Any) -> "CommandBuilder":
        """Add parameter convertible to string"""
        self._params.append(value)
        return self

    param = add_parameter

    def add_parameters(self, values: Sequence[Any]) -> "CommandBuilder":
        """Add multiple parameters at once"""
        self._params.extend(values)
        return self

    def add(self, item: Any, value: Any = None) -> "CommandBuilder":
        """
        Add an item to command

        Tagged items (Flag, KeyValue, Positional, PositionalBatch) go to the
        matching operation. Otherwise an item with value is an argument, a list
        or tuple adds parameters and anything else adds one parameter.

            cmd << Flag("preserve")  # jpegoptim --preserve
            cmd << "file.jpg"        # jpegoptim --preserve file.jpg
        """
        if isinstance(item, Flag):
            return self.add_argument(item.name)
        if isinstance(item, KeyValue):
            return self.add_argument(item.name, item.value)
        if isinstance(item, Positional):
            return self.add_parameter(item.value)
        if isinstance(item, PositionalBatch):
            return self.add_parameters(item.values)

        if value is not None:
            return self.add_argument(item, value)
        elif isinstance(item, (list, tuple)):
            return self.add_parameters(item)
        else:
            return self.add_parameter(item)

    def __lshift__(self, item: Any) -> "CommandBuilder":
        return self.add(item)

    @staticmethod
    def quote(value: Any) -> str:
        return quote(value)

    def render(self) -> str:
        """Convert command to string"""
        return format_command(self.command, self._args, self._params, self._separators)

    def __str__(self):
        return self.render()

    def __repr__(self):
        return f"{self.__class__.__name__}({self.render()!r})"

    def execute(self, callback: Optional[Callable[[str, bool], Any]] = None):
        """
        Execute the command

        Without callback the command runs synchronously. With callback it is
        scheduled on the running asyncio loop and the callback gets the output
        and whether the stripped output is empty.

        Args:
            callback: Called as callback(output, is_empty) for asynchronous run

        Returns:
            The command output, or the scheduled task if asynchronous
        """
        cmd = self.render()
        logger.debug(f"Rendered command: `{cmd}`")
        if callback is None:
            return self.executor.run_blocking(cmd)

        def on_complete(out: str):
            callback(out, not out.strip())

        return self.executor.run_non_blocking(cmd, on_complete)

    exec = execute

    def reset(self) -> "CommandBuilder":
        """Reset arguments and parameters, so prepare it for a new build"""
        self._args = []
        self._params = []
        return self
