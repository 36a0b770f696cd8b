from django.db import transaction
from django.db.models import BigIntegerField, F, IntegerField, Value
from django.db.models.functions import Cast, Least

from apps.common.repository import GenericRepository
from .models import CartItem, MAX_QUANTITY


class CartItemRepository(GenericRepository[CartItem]):
    def __init__(self):
        super().__init__(CartItem)

    def list_for_cart(self, cart_key: str):
        return self.model.objects.filter(cart_key=cart_key).order_by("id")

    def get_for_cart_product(self, cart_key: str, product_id: int):
        return self.get(cart_key=cart_key, product_id=product_id)

    def add_or_increment(self, cart_key: str, product_id: int, quantity: int, **snapshot):
        """Insert the line, or add ``quantity`` to the existing one.

        The unique (cart_key, product_id) constraint makes a concurrent insert
        fall back to the existing row inside ``get_or_create``, and the
        increment is evaluated by the database, so concurrent adds neither
        duplicate the row nor lose quantity. The existing snapshot
        (name/price/images) is left untouched. Returns ``(item, created)``.
        """
        with transaction.atomic():
            item, created = self.model.objects.get_or_create(
                cart_key=cart_key,
                product_id=product_id,
                defaults={**snapshot, "quantity": quantity},
            )
            if not created:
                self.model.objects.filter(pk=item.pk).update(
                    quantity=Least(
                        Cast(F("quantity"), BigIntegerField())
                        + Value(quantity, output_field=BigIntegerField()),
                        Value(MAX_QUANTITY, output_field=BigIntegerField()),
                        output_field=IntegerField(),
                    )
                )
                item.refresh_from_db(fields=["quantity"])
        return item, created

    def set_quantity(self, cart_key: str, product_id: int, quantity: int) -> int:
        return self.update_where(
            {"cart_key": cart_key, "product_id": product_id}, quantity=quantity
        )

    def delete_product(self, cart_key: str, product_id: int) -> int:
        return self.delete_where(cart_key=cart_key, product_id=product_id)

    def delete_for_cart(self, cart_key: str) -> int:
        return self.delete_where(cart_key=cart_key)
