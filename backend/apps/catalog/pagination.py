from django.conf import settings
from rest_framework.pagination import LimitOffsetPagination
from rest_framework.response import Response


class ProductListPagination(LimitOffsetPagination):
    """``?offset=&limit=`` paging that answers with a bare list.

    The total number of matches travels in the ``X-Total-Count`` header so the
    body stays a plain array of products.
    """

    default_limit = settings.CATALOG_PAGE_SIZE
    max_limit = settings.CATALOG_MAX_PAGE_SIZE

    def get_paginated_response(self, data):
        return Response(data, headers={"X-Total-Count": str(self.count)})
