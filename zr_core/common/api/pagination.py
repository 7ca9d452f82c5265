# zr_core/common/api/pagination.py
from __future__ import annotations

from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class DefaultPagination(PageNumberPagination):
    page_size = 20
    page_size_query_param = "page_size"
    max_page_size = 100


def paginate(request, queryset, serializer_class, *, context=None) -> Response:
    """
    Paginate a queryset from inside an @action, keeping the
    { count, next, previous, results } contract of the router views.
    """
    paginator = DefaultPagination()
    ctx = context or {"request": request}
    page = paginator.paginate_queryset(queryset, request)
    if page is None:
        return Response(serializer_class(queryset, many=True, context=ctx).data)
    return paginator.get_paginated_response(serializer_class(page, many=True, context=ctx).data)
