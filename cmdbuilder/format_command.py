# -*- coding: utf-8 -*-
"""
@author:XuMing(xuming624@qq.com)
@description: String helpers for rendering a command line
"""
from typing import Any, Iterable, NamedTuple, Optional, Tuple


class Separators(NamedTuple):
    """
    Separators matrix, in the order they appear in a command:

        # ("-", " ", "--", "=")
        command -s something --long=something
    """
    short_prefix: str = "-"
    short_value_sep: str = " "
    long_prefix: str = "--"
    long_value_sep: str = "="


DEFAULT_SEPARATORS = Separators()


def quote(value: Any) -> str:
    """
    Quote a value for use in a command line

    If a single quote is found, double quotes are escaped by backslash and
    the value is quoted by double quotes. If only double quotes are found,
    the value is quoted by single quotes. A value with a space is quoted by
    double quotes too. Anything else is returned as is.

        quote("hello 'something' world")   # "hello 'something' world"
        quote('hello "something" world')   # 'hello "something" world'
        quote('hello "som\'thing" world')  # "hello \"som'thing\" world"
        quote('hello something world')     # "hello something world"

    Args:
        value: Value convertible to string

    Returns:
        Quoted value
    """
    value = str(value)

    single = "'" in value
    double = '"' in value

    if single:
        value = value.replace('"', '\\"')
        quotation = '"'
    elif double:
        quotation = "'"
    elif " " in value:
        quotation = '"'
    else:
        quotation = ""

    return quotation + value + quotation


def escape_name(command: Any) -> str:
    """Escape spaces in the command name by backslash"""
    return str(command).replace(" ", "\\ ")


def is_short(name: Any) -> bool:
    # One-letter names are short arguments, everything else is long
    return len(str(name)) == 1


def format_argument(name: Any, value: Optional[Any] = None,
                    separators: Tuple[str, str, str, str] = DEFAULT_SEPARATORS) -> str:
    """
    Format one argument, without the leading space

    Args:
        name: Argument name
        value: Argument value, None for a flag
        separators: Separators matrix

    Returns:
        Formatted argument, e.g. "-m 2" or "--max=2"
    """
    short_prefix, short_value_sep, long_prefix, long_value_sep = separators
    name = str(name)
    short = is_short(name)

    formatted = (short_prefix if short else long_prefix) + name
    if value is not None:
        formatted += (short_value_sep if short else long_value_sep) + quote(value)
    return formatted


def format_command(command: Any, arguments: Iterable[Tuple[Any, Any]] = (),
                   parameters: Iterable[Any] = (),
                   separators: Tuple[str, str, str, str] = DEFAULT_SEPARATORS) -> str:
    """
    Render a command name, argument pairs and parameters into one string

    Arguments are rendered first, parameters after them, both in the given
    order.
    """
    cmd = escape_name(command)
    for name, value in arguments:
        cmd += " " + format_argument(name, value, separators)
    for param in parameters:
        cmd += " " + quote(param)
    return cmd
