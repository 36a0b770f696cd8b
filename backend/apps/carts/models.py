from django.conf import settings
from django.db import models

# Upper bound of the 32-bit signed integer columns.
INTEGER_COLUMN_MAX = 2147483647
MAX_QUANTITY = INTEGER_COLUMN_MAX
PRODUCT_ID_MAX = INTEGER_COLUMN_MAX
PRICE_MAX = INTEGER_COLUMN_MAX


def default_cart_key():
    return settings.CART_DEFAULT_KEY


class CartItem(models.Model):
    """One product line of a cart; the product fields are a snapshot taken on first add."""

    cart_key = models.CharField(max_length=64, default=default_cart_key)
    product_id = models.IntegerField()
    name = models.CharField(max_length=255)
    price = models.IntegerField()
    # JSON array of image references, see apps.common.images
    images = models.TextField(blank=True, default="[]")
    quantity = models.IntegerField(default=1)

    class Meta:
        db_table = "cart"
        constraints = [
            models.UniqueConstraint(
                fields=["cart_key", "product_id"], name="cart_one_row_per_product"
            ),
        ]

    def __str__(self):
        return f"{self.quantity} x product {self.product_id} in cart {self.cart_key}"
