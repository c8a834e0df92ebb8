# 📄 File: app/shared/utils/pagination.py

# 🧭 Purpose (Layman Explanation):
# Lets the back office ask for lists one page at a time ("page 2, 10 per page, sorted by name")
# and answers with the page plus how many items exist in total.

# 🧪 Purpose (Technical Summary):
# React-Admin style list query parameters (_limit, _page, _sort, _order) as a FastAPI dependency,
# case-insensitive column sorting for SQLAlchemy selects, and the {data, total} / 204 envelope.

# 🔗 Dependencies:
# - FastAPI Query/Response, SQLAlchemy Select

# 🔄 Connected Modules / Calls From:
# Used by: every list endpoint and repository ``list_page`` implementation

from typing import Any, Callable, Dict, Generic, List, Optional, Sequence, TypeVar, Union

from fastapi import Query, Response, status
from pydantic import BaseModel
from sqlalchemy import Select, asc, desc

from app.shared.config.settings import get_settings

T = TypeVar("T")


class PageResponse(BaseModel, Generic[T]):
    """List envelope returned by paginated endpoints."""
    data: List[T]
    total: int


class PageParams:
    """Pagination and ordering request for a list endpoint."""

    def __init__(self, limit: int, page: int = 1, sort: str = "id", order: str = "ASC"):
        self.limit = max(limit, 1)
        self.page = max(page, 1)
        self.sort = sort or "id"
        self.order = (order or "ASC").upper()

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def descending(self) -> bool:
        return self.order == "DESC"

    def __repr__(self) -> str:
        return f"PageParams(limit={self.limit}, page={self.page}, sort={self.sort!r}, order={self.order!r})"


def page_params(default_limit: Optional[int] = None) -> Callable[..., PageParams]:
    """
    Build a FastAPI dependency reading ``_limit``, ``_page``, ``_sort`` and ``_order``.

    Args:
        default_limit: Page size when ``_limit`` is omitted, ``DEFAULT_PAGE_SIZE`` otherwise
    """
    limit_default = default_limit or get_settings().DEFAULT_PAGE_SIZE

    def dependency(
        limit: int = Query(limit_default, alias="_limit", ge=1, description="Items per page"),
        page: int = Query(1, alias="_page", ge=1, description="1-based page number"),
        sort: str = Query("id", alias="_sort", description="Field to sort by"),
        order: str = Query("ASC", alias="_order", description="ASC or DESC"),
    ) -> PageParams:
        return PageParams(limit=limit, page=page, sort=sort, order=order)

    return dependency


def _normalize(name: str) -> str:
    return name.replace("_", "").lower()


def apply_sorting(stmt: Select, model: Any, sort: str, descending: bool = False) -> Select:
    """
    Order ``stmt`` by the column of ``model`` matching ``sort``.

    Matching ignores case and underscores so ``ExpSuggested`` finds ``exp_suggested``.
    Unknown fields fall back to the primary key.
    """
    columns = {_normalize(column.key): column for column in model.__table__.columns}
    column = columns.get(_normalize(sort or ""))
    if column is None:
        column = columns["id"]
    return stmt.order_by(desc(column) if descending else asc(column))


def apply_page(stmt: Select, model: Any, params: PageParams) -> Select:
    stmt = apply_sorting(stmt, model, params.sort, params.descending)
    return stmt.offset(params.offset).limit(params.limit)


def paginated_response(items: Sequence[Any], total: int) -> Union[Dict[str, Any], Response]:
    """Wrap a page as ``{data, total}``; an empty page becomes ``204 No Content``."""
    if not items:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    data: List[Any] = list(items)
    return {"data": data, "total": total}
