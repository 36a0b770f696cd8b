import unittest

from apps.carts.dtos import CartItemDTO
from apps.carts.mappers import CartItemMapper


class StubCartItem:
    def __init__(self, images):
        self.id = 40
        self.product_id = 3
        self.name = "Розы"
        self.price = 4500
        self.images = images
        self.quantity = 2


class CartItemMapperTests(unittest.TestCase):
    def test_line_id_is_product_id(self):
        dto = CartItemMapper().to_dto(StubCartItem('["/a.jpg"]'))
        self.assertEqual(
            dto, CartItemDTO(id=3, name="Розы", price=4500, images=["/a.jpg"], quantity=2)
        )

    def test_bad_images_become_empty_list(self):
        dtos = CartItemMapper().many_to_dto([StubCartItem("[oops"), StubCartItem(None)])
        self.assertEqual([d.images for d in dtos], [[], []])
