###########################################################################
###########################################################################
## Module containing mapping and dictionary structures.                  ##
##                                                                       ##
## Copyright (C) 2022 Oliver Michael Kamperis                            ##
##                                                                       ##
## This program is free software: you can redistribute it and/or modify  ##
## it under the terms of the GNU General Public License as published by  ##
## the Free Software Foundation, either version 3 of the License, or     ##
## any later version.                                                    ##
##                                                                       ##
## This program is distributed in the hope that it will be useful,       ##
## but WITHOUT ANY WARRANTY; without even the implied warranty of        ##
## MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the          ##
## GNU General Public License for more details.                          ##
##                                                                       ##
## You should have received a copy of the GNU General Public License     ##
## along with this program. If not, see <https://www.gnu.org/licenses/>. ##
###########################################################################
###########################################################################

"""Module containing mapping and dictionary structures."""

import collections.abc
import logging
import types
from typing import Iterable, Iterator, Sequence, final

from mapsandbox.auxiliary.stringutils import is_blank, reverse_string

__copyright__ = "Copyright (C) 2022 Oliver Michael Kamperis"
__license__ = "GPL-3.0"

__all__ = (
    "StringAssociation",
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


def _derive_key(value: str, /) -> str:
    """Get the key a value is stored under."""
    return reverse_string(value)


@final
class StringAssociation(collections.abc.Mapping):
    """
    Class defining a string association where every key is the reversal of
    the value it maps to.

    Callers only ever supply values, the key of each entry is derived from
    its value, such that for every stored pair `(key, value)` it holds that
    `key == value[::-1]`. The only operation that breaks this is
    `uppercase_all_keys()`, which rewrites the keys in place and leaves the
    values untouched.

    The association is read-only through the mapping protocol, all
    modification goes through the methods below. Queries return copies,
    never the underlying dictionary.

    None of the methods raise for missing data. Single-valued queries on an
    empty association return None, collection queries return empty lists,
    and modifications given None or blank arguments do nothing.

    Example Usage
    -------------
    ```
    >>> from mapsandbox.datastructures.mappings import StringAssociation
    >>> strings = StringAssociation(["abc", "xyz", "m"])
    >>> strings
    StringAssociation({'cba': 'abc', 'zyx': 'xyz', 'm': 'm'})

    # Look up a value by its (reversed) key.
    >>> strings["cba"]
    'abc'

    # Sorted views, extremes and counts.
    >>> strings.get_values_sorted()
    ['abc', 'm', 'xyz']
    >>> strings.get_keys_sorted_descending()
    ['zyx', 'm', 'cba']
    >>> strings.get_smallest_key()
    'cba'
    >>> strings.get_largest_value()
    'xyz'

    # Values can be removed by value or by key.
    >>> strings.remove_by_value("xyz")
    >>> strings.remove_by_key("m")
    >>> strings
    StringAssociation({'cba': 'abc'})
    ```
    """

    __slots__ = {
        "__dict": "The mapping from reversed strings to strings."
    }

    __LOGGER = logging.getLogger("StringAssociation")

    def __init__(self, values: Iterable[str] | None = None, /) -> None:
        """
        Create a new string association, optionally initialised with the
        given values (added as by `add_value()`).
        """
        self.__dict: dict[str, str] = {}
        if values is not None:
            for value in values:
                self.add_value(value)

    def __repr__(self) -> str:
        """Get a string representation of the string association."""
        return f"{self.__class__.__name__}({self.__dict!r})"

    def __copy__(self) -> "StringAssociation":
        """Get a shallow copy of the string association."""
        association = self.__class__()
        association.__dict = dict(self.__dict)
        return association

    def copy(self) -> "StringAssociation":
        """Get a shallow copy of the string association."""
        return self.__copy__()

    def __getitem__(self, key: str, /) -> str:
        """Get the value stored under the given key."""
        return self.__dict[key]

    def __iter__(self) -> Iterator[str]:
        """Iterate over the keys in the string association."""
        return iter(self.__dict)

    def __len__(self) -> int:
        """Get the number of entries in the string association."""
        return len(self.__dict)

    @property
    def entries(self) -> types.MappingProxyType[str, str]:
        """Get a read-only snapshot of the key to value mapping."""
        return types.MappingProxyType(dict(self.__dict))

    def get_values_sorted(self) -> list[str]:
        """Get a list of the values sorted in ascending lexicographic order."""
        return sorted(self.__dict.values())

    def get_keys_sorted_descending(self) -> list[str]:
        """Get a list of the keys sorted in descending lexicographic order."""
        return sorted(self.__dict.keys(), reverse=True)

    def get_smallest_key(self) -> str | None:
        """
        Get the lexicographically smallest key, or None if the association
        is empty.
        """
        return min(self.__dict.keys(), default=None)

    def get_largest_value(self) -> str | None:
        """
        Get the lexicographically largest value, or None if the association
        is empty.

        Note that this compares values, whereas `get_smallest_key()`
        compares keys.
        """
        return max(self.__dict.values(), default=None)

    def get_keys_uppercased(self) -> list[str]:
        """
        Get a list of the keys converted to upper case.

        The order of the keys is unspecified, and the association itself is
        not modified, see `uppercase_all_keys()`.
        """
        return [key.upper() for key in self.__dict]

    def count_distinct_values(self) -> int:
        """Get the number of distinct values in the association."""
        return len(set(self.__dict.values()))

    def add_value(self, value: str | None, /) -> None:
        """
        Add a value to the association, stored under its reversal.

        Does nothing if the value is None or blank. If another value is
        already stored under the same key, it is replaced, so this may or
        may not increase the size of the association.
        """
        if is_blank(value):
            self.__LOGGER.debug("Ignoring blank value %r.", value)
            return
        self.__put(value)

    def remove_by_key(self, key: str | None, /) -> None:
        """
        Remove the entry stored under the given key.

        Does nothing if the key is None or not in the association.
        """
        if key is None:
            return
        if self.__dict.pop(key, None) is not None:
            self.__LOGGER.debug("Removed entry with key %r.", key)

    def remove_by_value(self, value: str | None, /) -> None:
        """
        Remove the entry holding the given value.

        The entry is found by the key derived from the value, rather than by
        searching the values. Does nothing if the value is None or not in
        the association.
        """
        if value is None:
            return
        self.remove_by_key(_derive_key(value))

    def reset_from(self, items: Sequence[object] | None, /) -> None:
        """
        Remove all entries and re-fill the association with the string
        representations of the given objects.

        Each object is converted with `str()` and stored under the reversal
        of that string, later objects replacing earlier ones with the same
        key. None objects are skipped. If `items` is None the association is
        left empty.
        """
        self.__dict.clear()
        if items is None:
            self.__LOGGER.debug("Reset to empty.")
            return
        for item in items:
            if item is not None:
                self.__put(str(item))
        self.__LOGGER.debug("Reset with %d entries.", len(self.__dict))

    def uppercase_all_keys(self) -> None:
        """
        Replace every key with its upper case form, keeping the values.

        Where several keys have the same upper case form, the entry that
        comes last in insertion order is kept. Keys are generally no longer
        the reversal of their values after this.
        """
        uppercased: dict[str, str] = {}
        for key, value in self.__dict.items():
            uppercased[key.upper()] = value
        lost: int = len(self.__dict) - len(uppercased)
        self.__dict = uppercased
        self.__LOGGER.debug(
            "Converted keys to upper case, %d entries lost to collisions.",
            lost
        )

    def contains_all_values(
        self,
        candidates: Sequence[str | None] | None, /
    ) -> bool:
        """
        Check if every candidate is one of the values in the association.

        Returns True if `candidates` is None or empty. How many times a
        candidate occurs is not checked.
        """
        if not candidates:
            return True
        values: list[str] = list(self.__dict.values())
        return all(candidate in values for candidate in candidates)

    def clear(self) -> None:
        """Remove all entries from the association."""
        self.__dict.clear()
        self.__LOGGER.debug("Cleared.")

    def __put(self, value: str, /) -> None:
        """Store a value under its derived key."""
        key: str = _derive_key(value)
        if key in self.__dict:
            self.__LOGGER.debug(
                "Replacing %r with %r under key %r.",
                self.__dict[key], value, key
            )
        else:
            self.__LOGGER.debug("Added %r under key %r.", value, key)
        self.__dict[key] = value
