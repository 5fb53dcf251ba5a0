"""Listing query builder for the public job board.

Learn: GET /all-jobs takes three optional knobs: category filter,
title search, deadline sort. They combine with AND. The builder turns
them into a predicate and an ordering that the service applies to a
select(Job); keeping it separate lets tests check the SQL it produces.

Search text is matched as a literal substring: icontains(autoescape=True)
escapes %, _ and the escape character, so "50%_off" matches only that text.
"""

from dataclasses import dataclass, field
from typing import Literal, Optional

from sqlalchemy import and_, true
from sqlalchemy.sql.expression import ColumnElement, Select, UnaryExpression

from solosphere.db.models import Job

SortDirection = Literal["asc", "desc"]


@dataclass
class JobQuery:
    """A WHERE predicate plus ORDER BY clauses for jobs."""

    predicate: ColumnElement[bool]
    ordering: list[UnaryExpression] = field(default_factory=list)

    def apply(self, stmt: Select) -> Select:
        stmt = stmt.where(self.predicate)
        if self.ordering:
            stmt = stmt.order_by(*self.ordering)
        return stmt


def build_job_query(
    category: Optional[str] = None,
    search: Optional[str] = None,
    sort: Optional[SortDirection] = None,
) -> JobQuery:
    """Translate listing parameters into a JobQuery.

    Empty strings count as absent, matching how the frontend sends
    cleared inputs (?filter=&search=).
    """
    clauses: list[ColumnElement[bool]] = []
    if search:
        clauses.append(Job.title.icontains(search, autoescape=True))
    if category:
        clauses.append(Job.category == category)

    ordering: list[UnaryExpression] = []
    if sort == "asc":
        ordering.append(Job.deadline.asc())
    elif sort == "desc":
        ordering.append(Job.deadline.desc())

    return JobQuery(predicate=and_(true(), *clauses), ordering=ordering)
