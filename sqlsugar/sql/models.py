# sqlsugar — syntactic sugar over DB-API statement execution
# Copyright (C) 2024-2026 Dr Horst Herb
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""Value types passed between the helpers, the builder and the executor."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, NamedTuple, Union

ASC = "asc"
DESC = "desc"
DIRECTIONS = (ASC, DESC)


class Statement(NamedTuple):
    """A SQL string and its bound parameters, in placeholder order.

    Unpacks as a pair, so it can be handed to anything expecting
    ``(sql, params)``.
    """

    sql: str
    params: tuple = ()


@dataclass(frozen=True)
class ByKeys:
    """Equality predicates on columns, AND-ed together.

    ``None`` values match with ``IS NULL``.
    """

    key_map: Mapping[str, Any]


@dataclass(frozen=True)
class Where:
    """An explicit SQL WHERE fragment (without the ``WHERE`` keyword)."""

    fragment: str
    params: tuple = ()


WhereClause = Union[ByKeys, Where]


def as_where(value: Any) -> WhereClause:
    """Coerce a caller-supplied where argument into a :data:`WhereClause`.

    Accepts a mapping (column -> value), a ``(fragment, params)`` pair, or
    an existing :class:`ByKeys` / :class:`Where`.

    Raises:
        TypeError: For any other shape.
    """
    if isinstance(value, (ByKeys, Where)):
        return value
    if isinstance(value, Mapping):
        return ByKeys(value)
    if (
        isinstance(value, (tuple, list))
        and len(value) == 2
        and isinstance(value[0], str)
        and isinstance(value[1], Sequence)
        and not isinstance(value[1], str)
    ):
        return Where(value[0], tuple(value[1]))
    raise TypeError(
        "where must be a mapping of column -> value or a (fragment, params) "
        f"pair, got {value!r}"
    )
