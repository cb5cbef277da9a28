###############################################################################
# Copyright (C) 2023 Oliver Michael Kamperis
# Email: olliekampo@gmail.com
#
# This program is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or any later version.
#
# This program is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE. See the GNU General Public License for details.
#
# You should have received a copy of the GNU General Public License along with
# this program. If not, see <https://www.gnu.org/licenses/>.

"""Run the string association sandbox on the command line."""

import argparse
import logging
import sys
import tomllib
from typing import Any, Final, NamedTuple, Sequence

import pyfiglet

from mapsandbox.auxiliary.argparseutils import bool_options, optional_str
from mapsandbox.datastructures.mappings import StringAssociation

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"
__version__ = "1.0.0"

__all__ = ()


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


_LOGGER: Final[logging.Logger] = logging.getLogger("StringSandbox")

_CONFIG_TABLE: Final[str] = "sandbox"


class _SandboxConfig(NamedTuple):
    """
    A class to store the sandbox configuration loaded from a TOML file.

    Items
    -----
    `values: list[Any] | None` - Objects to reset the association from, their
    string representations become the values. None leaves the association
    empty.

    `remove_keys: Sequence[str]` - Keys to remove after loading.

    `remove_values: Sequence[str]` - Values to remove after loading.

    `uppercase: bool` - Whether to convert all keys to upper case.

    `check: list[str] | None` - Values to check are all contained in the
    association, None if no check is requested.
    """

    values: list[Any] | None = None
    remove_keys: Sequence[str] = ()
    remove_values: Sequence[str] = ()
    uppercase: bool = False
    check: list[str] | None = None


def _get_string_list(
    table: dict[str, Any],
    name: str
) -> list[str] | None:
    """Get a list of strings from a configuration table."""
    if name not in table:
        return None
    items = table[name]
    if (not isinstance(items, list)
            or not all(isinstance(item, str) for item in items)):
        raise ValueError(
            f"Configuration key '{name}' must be a list of strings. "
            f"Got; {items!r}."
        )
    return items


def _load_config(path: str) -> _SandboxConfig:
    """Load the sandbox configuration from the TOML file at the given path."""
    with open(path, "rb") as file:
        config_dict = tomllib.load(file)

    table = config_dict.get(_CONFIG_TABLE, {})
    if not isinstance(table, dict):
        raise ValueError(f"'{_CONFIG_TABLE}' must be a table.")

    values = table.get("values")
    if values is not None and not isinstance(values, list):
        raise ValueError(
            f"Configuration key 'values' must be a list. Got; {values!r}."
        )
    uppercase = table.get("uppercase", False)
    if not isinstance(uppercase, bool):
        raise ValueError(
            "Configuration key 'uppercase' must be a boolean. "
            f"Got; {uppercase!r}."
        )

    return _SandboxConfig(
        values=values,
        remove_keys=_get_string_list(table, "remove_keys") or [],
        remove_values=_get_string_list(table, "remove_values") or [],
        uppercase=uppercase,
        check=_get_string_list(table, "check")
    )


def _build_parser() -> argparse.ArgumentParser:
    """Build the command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="mapsandbox",
        description="Build a string association where each key is the "
                    "reversal of its value, and report on its contents."
    )
    parser.add_argument(
        "-c", "--config",
        type=optional_str,
        default=None,
        metavar="PATH",
        help="A TOML file with a [sandbox] table to load first."
    )
    parser.add_argument(
        "-a", "--add",
        nargs="*",
        default=[],
        metavar="VALUE",
        help="Values to add."
    )
    parser.add_argument(
        "--remove-key",
        nargs="*",
        default=[],
        metavar="KEY",
        help="Keys to remove."
    )
    parser.add_argument(
        "--remove-value",
        nargs="*",
        default=[],
        metavar="VALUE",
        help="Values to remove."
    )
    parser.add_argument(
        "--uppercase",
        help="Convert all keys to upper case before reporting.",
        **bool_options()
    )
    parser.add_argument(
        "--check",
        nargs="*",
        default=None,
        metavar="VALUE",
        help="Values to check are all contained in the association."
    )
    parser.add_argument(
        "--banner",
        help="Print a banner before the report.",
        **bool_options()
    )
    parser.add_argument(
        "--debug",
        help="Log every modification of the association.",
        **bool_options()
    )
    return parser


def _build_association(
    config: _SandboxConfig,
    args: argparse.Namespace
) -> StringAssociation:
    """
    Build the association from the configuration, then the command line
    arguments.
    """
    association = StringAssociation()
    association.reset_from(config.values)
    for value in args.add:
        association.add_value(value)
    for key in [*config.remove_keys, *args.remove_key]:
        association.remove_by_key(key)
    for value in [*config.remove_values, *args.remove_value]:
        association.remove_by_value(value)
    if config.uppercase or args.uppercase:
        association.uppercase_all_keys()
    return association


def _report(association: StringAssociation) -> list[str]:
    """Get the lines of the report on the association's contents."""
    return [
        f"Entries: {dict(association.entries)}",
        f"Values sorted: {association.get_values_sorted()}",
        f"Keys descending: {association.get_keys_sorted_descending()}",
        f"Smallest key: {association.get_smallest_key()}",
        f"Largest value: {association.get_largest_value()}",
        f"Keys upper case: {association.get_keys_uppercased()}",
        f"Distinct values: {association.count_distinct_values()}"
    ]


def _main(argv: Sequence[str] | None = None) -> int:
    """Run the string association sandbox on the command line."""
    parser = _build_parser()
    args: argparse.Namespace = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
        force=True
    )

    if args.config is not None:
        _LOGGER.debug("Loading configuration from '%s'.", args.config)
        config = _load_config(args.config)
    else:
        config = _SandboxConfig()

    if args.banner:
        print(pyfiglet.figlet_format("String Sandbox", font="small"))

    association = _build_association(config, args)
    for line in _report(association):
        print(line)

    if config.check is None and args.check is None:
        return 0
    candidates = [*(config.check or []), *(args.check or [])]
    contained = association.contains_all_values(candidates)
    print(f"Contains all {candidates}: {contained}")
    return 0 if contained else 1


if __name__ == "__main__":
    sys.exit(_main())
