"""
db/query_builder.py
-------------------
Small SELECT builder for statements whose filters are only known at
call time. Predicates are collected as (template, values) pairs and the
statement text plus its parameter list are produced together in
`render()`, so marker numbering always follows parameter order.

Templates mark each bound value with `{}`:

    query = SelectQuery("SELECT * FROM properties")
    query.where("city ILIKE {}", "%ark%")
    query.where("cost_per_night BETWEEN {} AND {}", 10000, 20000)
    sql, params = query.render("numeric")
    # ... WHERE city ILIKE $1 AND cost_per_night BETWEEN $2 AND $3
"""

from typing import Any, Optional

PARAMSTYLES = ("format", "numeric")


class SelectQuery:
    """Accumulates the optional clauses of one SELECT statement."""

    def __init__(self, base: str):
        self.base = base.strip()
        self.predicates: list[tuple[str, tuple]] = []
        self.group_by: Optional[str] = None
        self.having_predicates: list[tuple[str, tuple]] = []
        self.order_by: Optional[str] = None
        self.limit: Optional[int] = None

    def where(self, template: str, *values: Any) -> "SelectQuery":
        self.predicates.append((template, values))
        return self

    def group(self, columns: str) -> "SelectQuery":
        self.group_by = columns
        return self

    def having(self, template: str, *values: Any) -> "SelectQuery":
        self.having_predicates.append((template, values))
        return self

    def order(self, columns: str) -> "SelectQuery":
        self.order_by = columns
        return self

    def limit_to(self, count: int) -> "SelectQuery":
        self.limit = count
        return self

    def render(self, paramstyle: str = "format") -> tuple[str, list]:
        """
        Build the statement text and its parameter list.

        Args:
            paramstyle: "format" for `%s` markers (psycopg2) or "numeric"
                for 1-indexed `$n` markers.

        Returns:
            (statement, params) where the n-th marker binds params[n-1].

        Raises:
            ValueError: If `paramstyle` is not supported.
        """
        if paramstyle not in PARAMSTYLES:
            raise ValueError(f"Unsupported paramstyle: {paramstyle!r}")

        params: list = []

        def bind(template: str, values: tuple) -> str:
            markers = []
            for value in values:
                params.append(value)
                markers.append("%s" if paramstyle == "format" else f"${len(params)}")
            return template.format(*markers)

        parts = [self.base]
        if self.predicates:
            parts.append(
                "WHERE " + " AND ".join(bind(t, v) for t, v in self.predicates)
            )
        if self.group_by:
            parts.append(f"GROUP BY {self.group_by}")
        if self.having_predicates:
            parts.append(
                "HAVING " + " AND ".join(bind(t, v) for t, v in self.having_predicates)
            )
        if self.order_by:
            parts.append(f"ORDER BY {self.order_by}")
        if self.limit is not None:
            parts.append(bind("LIMIT {}", (self.limit,)))
        return "\n".join(parts) + ";", params
