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

"""Module defining utilities for manipulating strings."""

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"

__all__ = (
    "reverse_string",
    "is_blank"
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


def reverse_string(string: str, /) -> str:
    """
    Reverse the order of the characters in a string.

    Reversal is a bijection between strings of equal length, so two distinct
    strings never reverse to the same string.

    For example:
    ```
    >>> reverse_string("abc")
    'cba'
    >>> reverse_string("")
    ''
    ```
    """
    return string[::-1]


def is_blank(string: str | None, /) -> bool:
    """
    Check if a string is None, empty, or contains only whitespace.

    For example:
    ```
    >>> is_blank(None)
    True
    >>> is_blank("   ")
    True
    >>> is_blank(" a ")
    False
    ```
    """
    return string is None or not string.strip()
