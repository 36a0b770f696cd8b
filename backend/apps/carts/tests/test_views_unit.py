import unittest
from unittest.mock import Mock, patch

from rest_framework.test import APIRequestFactory

from apps.carts.dtos import CartItemDTO
from apps.carts.views import CartClearView, CartItemView, CartView


def make_dto(product_id=1, quantity=1):
    return CartItemDTO(
        id=product_id, name="Розы", price=4500, images=["/a.jpg"], quantity=quantity
    )


class CartViewsUnitTests(unittest.TestCase):
    def setUp(self):
        self.factory = APIRequestFactory()

    def test_list(self):
        service = Mock()
        service.list_items.return_value = [make_dto(quantity=2)]
        with patch.object(CartView, "service", service):
            response = CartView.as_view()(self.factory.get("/api/cart"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.data,
            [{"id": 1, "name": "Розы", "price": 4500, "images": ["/a.jpg"], "quantity": 2}],
        )

    def test_add_new_line(self):
        service = Mock()
        service.add_item.return_value = (make_dto(), True)
        with patch.object(CartView, "service", service):
            request = self.factory.post(
                "/api/cart", {"id": 1, "name": "Розы", "price": 4500}, format="json"
            )
            response = CartView.as_view()(request)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data, {"message": "Item added to cart"})
        payload = service.add_item.call_args[0][0]
        self.assertEqual(payload["images"], [])
        self.assertEqual(payload["quantity"], 1)

    def test_add_existing_line(self):
        service = Mock()
        service.add_item.return_value = (make_dto(quantity=3), False)
        with patch.object(CartView, "service", service):
            request = self.factory.post(
                "/api/cart", {"id": 1, "name": "Розы", "price": 4500, "quantity": 2}, format="json"
            )
            response = CartView.as_view()(request)
        self.assertEqual(response.data, {"message": "Item quantity updated"})

    def test_add_rejects_invalid_payload(self):
        service = Mock()
        with patch.object(CartView, "service", service):
            request = self.factory.post(
                "/api/cart", {"id": 0, "name": "", "price": 1, "quantity": -1}, format="json"
            )
            response = CartView.as_view()(request)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["code"], "VALIDATION_ERROR")
        self.assertEqual(set(response.data["details"]), {"id", "name", "quantity"})
        service.add_item.assert_not_called()

    def test_update_quantity(self):
        service = Mock()
        service.update_quantity.return_value = make_dto(quantity=10)
        with patch.object(CartItemView, "service", service):
            request = self.factory.put("/api/cart/1", {"quantity": 10}, format="json")
            response = CartItemView.as_view()(request, product_id="1")
        self.assertEqual(response.status_code, 200)
        service.update_quantity.assert_called_once_with(1, {"quantity": 10})

    def test_update_quantity_missing_line(self):
        service = Mock()
        service.update_quantity.return_value = None
        with patch.object(CartItemView, "service", service):
            request = self.factory.put("/api/cart/9", {"quantity": 1}, format="json")
            response = CartItemView.as_view()(request, product_id="9")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data["code"], "NOT_FOUND")
        self.assertEqual(response.data["error"], "Cart item not found")
        self.assertEqual(response.data["details"], {"id": "9"})

    def test_update_quantity_requires_positive_value(self):
        service = Mock()
        with patch.object(CartItemView, "service", service):
            request = self.factory.put("/api/cart/1", {"quantity": 0}, format="json")
            response = CartItemView.as_view()(request, product_id="1")
        self.assertEqual(response.status_code, 400)
        service.update_quantity.assert_not_called()

    def test_remove(self):
        service = Mock()
        service.remove_item.return_value = False
        with patch.object(CartItemView, "service", service):
            response = CartItemView.as_view()(self.factory.delete("/api/cart/5"), product_id="5")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data, {"message": "Item removed from cart"})
        service.remove_item.assert_called_once_with(5)

    def test_clear(self):
        service = Mock()
        service.clear.return_value = 3
        with patch.object(CartClearView, "service", service):
            response = CartClearView.as_view()(self.factory.delete("/api/cart/clear"))
        self.assertEqual(response.data, {"message": "Cart cleared"})
