"""Page-number pagination rendered inside the response envelope.

Query parameters follow the storefront admin panel: ``?page=2&limit=10``.
The collection key is chosen by the view (``orders``, ``promos``...).
A missing or non-numeric ``page`` falls back to 1, and a page past the end
comes back empty instead of as a 404.
"""

from __future__ import annotations

import math
from typing import Any, List

from django.core.paginator import EmptyPage, Page
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class StandardResultsSetPagination(PageNumberPagination):
    page_size_query_param = "limit"
    max_page_size = 100
    results_key = "results"

    def __init__(self, results_key: str | None = None) -> None:
        if results_key:
            self.results_key = results_key

    def get_page_number(self, request, paginator) -> int:
        raw = request.query_params.get(self.page_query_param) or 1
        if raw in self.last_page_strings:
            return paginator.num_pages
        try:
            number = int(raw)
        except (TypeError, ValueError):
            return 1
        return number if number >= 1 else 1

    def paginate_queryset(self, queryset, request, view=None):
        page_size = self.get_page_size(request)
        if not page_size:
            return None

        paginator = self.django_paginator_class(queryset, page_size)
        page_number = self.get_page_number(request, paginator)
        try:
            self.page = paginator.page(page_number)
        except EmptyPage:
            self.page = Page([], page_number, paginator)

        self.request = request
        return list(self.page)

    def get_paginated_response(self, data: List[Any]) -> Response:
        paginator = self.page.paginator
        return Response(
            {
                "success": True,
                self.results_key: data,
                "pagination": {
                    "current": self.page.number,
                    "pages": math.ceil(paginator.count / paginator.per_page),
                    "total": paginator.count,
                },
            }
        )
