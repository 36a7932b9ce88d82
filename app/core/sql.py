"""
SQL fragment builders.

Two kinds of fragment are produced here, both using positional ``$n``
placeholders with a separate value list:

- SET clauses for partial updates (``sql_for_partial_update``)
- WHERE predicates for filtered listings (``sql_for_company_filter`` and
  ``sql_for_job_filter``)

Column names always come from hard-coded tables in application code and are
spliced in verbatim. Only values are parameterized.

``bind_params`` turns a fragment into a SQLAlchemy ``text()`` clause with
named binds so it can be executed on any dialect.
"""

import logging
import math
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from sqlalchemy import text
from sqlalchemy.sql.elements import TextClause

from app.core.exceptions import BadParameterError, InvalidInputError

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\$(\d+)")
_NUMBER = re.compile(r"[+-]?[0-9]{1,19}(\.[0-9]{1,19})?")
# Range of the INTEGER columns the bounds compare against
_INT_MIN = -(2 ** 31)
_INT_MAX = 2 ** 31 - 1
_TRUTHY = {"true", "1", "yes", "on"}


@dataclass(frozen=True)
class UpdateClause:
    """SET clause plus the values bound to its placeholders, in order."""
    set_clause: str
    values: List[Any] = field(default_factory=list)


@dataclass(frozen=True)
class FilterClause:
    """WHERE predicates (without the WHERE keyword) plus their bound values."""
    where_clause: str
    values: List[Any] = field(default_factory=list)


def sql_for_partial_update(data: Mapping[str, Any], column_aliases: Mapping[str, str]) -> UpdateClause:
    """
    Build the SET clause for an UPDATE touching only the supplied fields.

    Args:
        data: Field name -> new value. Must not be empty.
        column_aliases: Field name -> column name. Fields missing here are
            used as the column name unchanged.

    Returns:
        UpdateClause where ``$i`` in ``set_clause`` binds to ``values[i-1]``

    Raises:
        InvalidInputError: If ``data`` is empty

    Example:
        >>> sql_for_partial_update({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"})
        UpdateClause(set_clause='"first_name"=$1, "age"=$2', values=['Aliya', 32])
    """
    if not data:
        raise InvalidInputError("No data")

    columns = []
    values = []
    for idx, (name, value) in enumerate(data.items(), start=1):
        columns.append(f'"{column_aliases.get(name, name)}"=${idx}')
        values.append(value)

    return UpdateClause(set_clause=", ".join(columns), values=values)


def parse_number(param: str, raw: Any):
    """
    Strictly parse a numeric query parameter.

    Accepts ints and finite floats, or strings made only of an optional sign,
    digits and an optional fractional part. Anything else (including
    ``"100abc"``, ``" 5"`` and booleans) is rejected, as are integers outside
    the signed 32-bit range.

    Raises:
        BadParameterError: Tagged with ``param`` if the value is not numeric
            or out of range
    """
    if isinstance(raw, bool):
        raise BadParameterError(param, f"{param} must be a number")

    if isinstance(raw, str):
        if not _NUMBER.fullmatch(raw):
            raise BadParameterError(param, f"{param} must be a number")
        try:
            raw = float(raw) if "." in raw else int(raw)
        except (ValueError, OverflowError):
            raise BadParameterError(param, f"{param} must be a number")

    if isinstance(raw, int):
        if not _INT_MIN <= raw <= _INT_MAX:
            raise BadParameterError(param, f"{param} is out of range")
        return raw
    if isinstance(raw, float) and math.isfinite(raw):
        return raw
    raise BadParameterError(param, f"{param} must be a number")


def is_truthy(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        return raw.strip().lower() in _TRUTHY
    return False


def _is_absent(raw: Any) -> bool:
    # Empty strings are treated exactly like a missing parameter
    return raw is None or (isinstance(raw, str) and not raw.strip())


@dataclass(frozen=True)
class NumericBound:
    param: str
    column: str
    operator: str

    def compile(self, raw: Any, index: int) -> Tuple[Optional[str], List[Any]]:
        return f"{self.column} {self.operator} ${index}", [parse_number(self.param, raw)]


@dataclass(frozen=True)
class BooleanFlag:
    param: str
    predicate: str

    def compile(self, raw: Any, index: int) -> Tuple[Optional[str], List[Any]]:
        return (self.predicate if is_truthy(raw) else None), []


@dataclass(frozen=True)
class SubstringMatch:
    param: str
    column: str

    def compile(self, raw: Any, index: int) -> Tuple[Optional[str], List[Any]]:
        return f"LOWER({self.column}) LIKE ${index} ESCAPE '\\'", [f"%{escape_like(str(raw).lower())}%"]


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so the value matches literally (with ESCAPE '\\')."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


# Declaration order is the predicate order: numeric bounds, flags, substrings.
COMPANY_FILTERS = (
    NumericBound("minEmployees", "num_employees", ">="),
    NumericBound("maxEmployees", "num_employees", "<="),
    SubstringMatch("nameLike", "handle"),
)

JOB_FILTERS = (
    NumericBound("minSalary", "salary", ">="),
    BooleanFlag("hasEquity", "equity IS NOT NULL AND equity > 0"),
    SubstringMatch("title", "title"),
)


def build_filter(params: Mapping[str, Any], filters: Sequence) -> Optional[FilterClause]:
    """
    Combine the predicates of every present parameter with AND.

    Returns:
        FilterClause, or None when no predicate applies (no filtering)
    """
    predicates: List[str] = []
    values: List[Any] = []

    for definition in filters:
        raw = params.get(definition.param)
        if _is_absent(raw):
            continue
        predicate, bound = definition.compile(raw, len(values) + 1)
        if predicate is None:
            continue
        predicates.append(predicate)
        values.extend(bound)

    if not predicates:
        return None

    clause = FilterClause(where_clause=" AND ".join(predicates), values=values)
    logger.debug(f"Built filter: {clause.where_clause} {clause.values}")
    return clause


def sql_for_company_filter(params: Mapping[str, Any]) -> Optional[FilterClause]:
    """
    Filter for GET /companies.

    Recognized parameters: minEmployees, maxEmployees, nameLike.

    Raises:
        BadParameterError: Non-numeric bound, or minEmployees > maxEmployees
    """
    min_raw = params.get("minEmployees")
    max_raw = params.get("maxEmployees")
    if not _is_absent(min_raw) and not _is_absent(max_raw):
        if parse_number("minEmployees", min_raw) > parse_number("maxEmployees", max_raw):
            raise BadParameterError("minEmployees", "minEmployees cannot be greater than maxEmployees")

    return build_filter(params, COMPANY_FILTERS)


def sql_for_job_filter(params: Mapping[str, Any]) -> Optional[FilterClause]:
    """
    Filter for GET /jobs.

    Recognized parameters: minSalary, hasEquity, title.

    Raises:
        BadParameterError: Non-numeric minSalary
    """
    return build_filter(params, JOB_FILTERS)


def bind_params(sql: str, values: Sequence[Any]) -> Tuple[TextClause, Dict[str, Any]]:
    """
    Rewrite ``$n`` placeholders into ``:pn`` binds for ``sqlalchemy.text``.

    Returns:
        (text clause, {"p1": values[0], "p2": values[1], ...})
    """
    params = {f"p{idx}": value for idx, value in enumerate(values, start=1)}
    return text(_PLACEHOLDER.sub(r":p\1", sql)), params
