"""
Article search criteria and the WHERE-clause builder.

A criteria object is sparse: a field left as None places no constraint.
Present fields are ANDed together, always on top of the soft-delete filter.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Collection, NamedTuple

from .converters import to_db_timestamp


@dataclass
class ArticleCriteria:
    id: str | None = None
    guid_in: Collection[str] | None = None
    title: str | None = None
    url: str | None = None
    publication_date_min: datetime | None = None  # exclusive
    feed_id: str | None = None

    def __post_init__(self):
        # A bare string is a Collection of characters, never a GUID set
        if isinstance(self.guid_in, (str, bytes)):
            raise TypeError("guid_in must be a collection of GUIDs, not a single string")


class Predicate(NamedTuple):
    sql: str
    params: dict[str, Any]


NOT_DELETED = Predicate("a.delete_date IS NULL", {})


def _guid_in(guids: Collection[str]) -> Predicate:
    if not guids:
        return Predicate("1 = 0", {})
    params = {f"guid_in_{i}": guid for i, guid in enumerate(guids)}
    placeholders = ", ".join(f":{name}" for name in params)
    return Predicate(f"a.guid IN ({placeholders})", params)


def _compare(sql: str, name: str) -> Callable[[Any], Predicate]:
    return lambda value: Predicate(sql, {name: value})


def predicates(criteria: ArticleCriteria) -> list[Predicate]:
    """Ordered predicates for the fields that are set."""
    candidates = [
        (criteria.id, _compare("a.id = :id", "id")),
        (criteria.guid_in, _guid_in),
        (criteria.title, _compare("a.title = :title", "title")),
        (criteria.url, _compare("a.url = :url", "url")),
        (to_db_timestamp(criteria.publication_date_min),
         _compare("a.publication_date > :publication_date_min", "publication_date_min")),
        (criteria.feed_id, _compare("a.feed_id = :feed_id", "feed_id")),
    ]

    result = [NOT_DELETED]
    for value, make in candidates:
        if value is not None:
            result.append(make(value))
    return result


def build_where(criteria: ArticleCriteria) -> tuple[str, dict[str, Any]]:
    """Fold the criteria into a WHERE clause and its parameter map."""
    clauses = []
    params: dict[str, Any] = {}
    for predicate in predicates(criteria):
        clauses.append(predicate.sql)
        params.update(predicate.params)

    if not clauses:
        return "", params
    return " WHERE " + " AND ".join(clauses), params
