import unittest
from unittest.mock import Mock, patch

from rest_framework.response import Response
from rest_framework.test import APIRequestFactory

from apps.catalog.dtos import CategoryDTO
from apps.catalog.views import CategoryListView, ProductListView


class CatalogViewsUnitTests(unittest.TestCase):
    def setUp(self):
        self.factory = APIRequestFactory()

    def test_product_list_passes_filters_to_service(self):
        service = Mock()
        service.list_products_paginated.return_value = Response([])
        with patch.object(ProductListView, "service", service):
            request = self.factory.get("/api/products", {"category": "Розы", "search": "бел"})
            response = ProductListView.as_view()(request)
        self.assertEqual(response.status_code, 200)
        _, kwargs = service.list_products_paginated.call_args
        self.assertEqual(kwargs["category"], "Розы")
        self.assertEqual(kwargs["search"], "бел")

    def test_category_list_serializes_dtos(self):
        service = Mock()
        service.list_categories.return_value = [CategoryDTO(1, "Розы")]
        with patch.object(CategoryListView, "service", service):
            response = CategoryListView.as_view()(self.factory.get("/api/categories"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data, [{"id": 1, "name": "Розы"}])
