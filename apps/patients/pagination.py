"""
Page requests, page results and the ``X-Meta-Pagination`` header.

Page numbers are zero-based on the wire. The header format is fixed for
existing clients:

    page-number=2,page-size=10,total-elements=47,total-pages=5
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping

from django.conf import settings

PAGINATION_HEADER = "X-Meta-Pagination"


def _int_param(value, default, minimum=0, maximum=None):
    try:
        n = int(value)
    except (TypeError, ValueError):
        return default
    if n < minimum:
        return default
    if maximum is not None:
        n = min(n, maximum)
    return n


@dataclass(frozen=True)
class PageMetadata:
    page_number: int
    page_size: int
    total_elements: int
    total_pages: int

    def header_value(self) -> str:
        return (
            f"page-number={self.page_number},page-size={self.page_size},"
            f"total-elements={self.total_elements},total-pages={self.total_pages}"
        )


@dataclass(frozen=True)
class PageRequest:
    page_number: int = 0
    page_size: int = 30

    @property
    def offset(self) -> int:
        return self.page_number * self.page_size

    @classmethod
    def from_query_params(cls, params: Mapping[str, Any]) -> "PageRequest":
        """
        Read ``page`` and ``size``; malformed or negative values fall back to
        the defaults and oversized pages are clamped.
        """
        default_size = settings.PATIENTS_PAGE_SIZE
        size = _int_param(
            params.get("size"),
            default=default_size,
            minimum=1,
            maximum=settings.PATIENTS_MAX_PAGE_SIZE,
        )
        page = _int_param(params.get("page"), default=0)
        return cls(page_number=page, page_size=size)


@dataclass
class PatientPage:
    request: PageRequest
    total_elements: int
    contents: List[Any] = field(default_factory=list)

    @property
    def total_pages(self) -> int:
        return -(-self.total_elements // self.request.page_size)

    @property
    def has_content(self) -> bool:
        return bool(self.contents)

    def metadata(self) -> PageMetadata:
        return PageMetadata(
            page_number=self.request.page_number,
            page_size=self.request.page_size,
            total_elements=self.total_elements,
            total_pages=self.total_pages,
        )
