from django.db import migrations, models
import apps.carts.models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="CartItem",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "cart_key",
                    models.CharField(
                        default=apps.carts.models.default_cart_key, max_length=64
                    ),
                ),
                ("product_id", models.IntegerField()),
                ("name", models.CharField(max_length=255)),
                ("price", models.IntegerField()),
                ("images", models.TextField(blank=True, default="[]")),
                ("quantity", models.IntegerField(default=1)),
            ],
            options={
                "db_table": "cart",
            },
        ),
        migrations.AddConstraint(
            model_name="cartitem",
            constraint=models.UniqueConstraint(
                fields=("cart_key", "product_id"), name="cart_one_row_per_product"
            ),
        ),
    ]
