# Copyright (C) 2023 Oliver Michael Kamperis
# Email: o.m.kamperis@gmail.com
#
# This program is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or any later version.
#
# This program is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE. See the GNU General Public License for details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.

"""Module defining argument parsing utilities."""

from typing import Any

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"

__all__ = (
    "bool_options",
    "optional_bool",
    "optional_str"
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


_TRUE_STRINGS = frozenset(["true", "yes", "on", "1"])
_FALSE_STRINGS = frozenset(["false", "no", "off", "0"])


def bool_options(
    default: bool | None = False,
    const: bool | None = True
) -> dict[str, Any]:
    """
    Create the keyword arguments for a Boolean flag.

    The flag may be given alone (taking the value `const`), with an explicit
    value such as `--flag no`, or not at all (taking the value `default`).

    Parameters
    ----------
    `default: bool | None = False` - The argument value used when the
    argument is not given.

    `const: bool | None = True` - The argument value used when the argument
    is given without a value.

    Returns
    -------
    `dict[str, Any]` - Keyword arguments for `ArgumentParser.add_argument()`.
    """
    return {
        "nargs": "?",
        "default": default,
        "const": const,
        "type": optional_bool,
        "metavar": "BOOL"
    }


def optional_str(value: str) -> str | None:
    """
    Optional string argument type.

    Return None if the value is an empty string or the string "None",
    otherwise return the input string.
    """
    if not value or value == "None":
        return None
    return value


def optional_bool(value: str) -> bool | None:
    """
    Optional boolean argument type.

    Return None if the value is an empty string or the string "None",
    otherwise return the input string parsed as a boolean.
    """
    if not value or value == "None":
        return None
    if value.lower() in _TRUE_STRINGS:
        return True
    if value.lower() in _FALSE_STRINGS:
        return False
    raise ValueError(f"Cannot parse {value!r} as a boolean.")
