from django.core.management.base import BaseCommand
from django.db import transaction, connection
from django.core.management.color import no_style
from apps.catalog.models import Category, Product
from apps.carts.models import CartItem
from apps.common.images import encode_images

CATEGORIES = [
    "Розы",
    "Тюльпаны",
    "Пионы",
    "Композиции",
]

# (id, name, price, description, images, category)
PRODUCTS = [
    (
        1,
        "Букет из 25 красных роз",
        4500,
        "Классический букет из красных роз сорта Freedom, 60 см.",
        ["/images/roses-red-25-1.jpg", "/images/roses-red-25-2.jpg"],
        "Розы",
    ),
    (
        2,
        "Букет из 15 белых роз",
        3200,
        "Белые розы Avalanche в крафтовой упаковке.",
        ["/images/roses-white-15.jpg"],
        "Розы",
    ),
    (
        3,
        "Кустовые розы микс",
        2800,
        "Нежный букет из кустовых роз пастельных оттенков.",
        ["/images/spray-roses-mix-1.jpg", "/images/spray-roses-mix-2.jpg"],
        "Розы",
    ),
    (
        4,
        "Тюльпаны 21 шт",
        2100,
        "Весенний букет из разноцветных тюльпанов.",
        ["/images/tulips-21.jpg"],
        "Тюльпаны",
    ),
    (
        5,
        "Белые тюльпаны",
        1900,
        "Пятнадцать белых тюльпанов с эвкалиптом.",
        ["/images/tulips-white.jpg"],
        "Тюльпаны",
    ),
    (
        6,
        "Пионы Сара Бернар",
        5200,
        "Ароматные розовые пионы, 11 штук.",
        ["/images/peonies-sarah-1.jpg", "/images/peonies-sarah-2.jpg"],
        "Пионы",
    ),
    (
        7,
        "Пионы и розы",
        4800,
        "Сборный букет из пионов и пионовидных роз.",
        ["/images/peonies-roses.jpg"],
        "Пионы",
    ),
    (
        8,
        "Корзина с гортензиями",
        6300,
        "Плетёная корзина с гортензиями и зеленью.",
        ["/images/basket-hydrangea.jpg"],
        "Композиции",
    ),
    (
        9,
        "Шляпная коробка с розами",
        3900,
        "Розы и эустома в шляпной коробке.",
        ["/images/hatbox-roses.jpg", "/images/hatbox-roses-top.jpg"],
        "Композиции",
    ),
]


class Command(BaseCommand):
    help = "Seed the bouquet catalog (categories and products)."

    def add_arguments(self, parser):
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Delete existing catalog and cart rows before seeding",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options["reset"]:
            self.stdout.write("Deleting existing catalog...")
            CartItem.objects.all().delete()
            Product.objects.all().delete()
            Category.objects.all().delete()

        self.stdout.write("Seeding categories...")
        name_to_cat = {}
        for name in CATEGORIES:
            cat, _ = Category.objects.get_or_create(name=name)
            name_to_cat[name] = cat

        self.stdout.write("Seeding products...")
        created_count = 0
        for pid, name, price, desc, images, cat_name in PRODUCTS:
            _, created = Product.objects.get_or_create(
                id=pid,
                defaults=dict(
                    name=name,
                    price=price,
                    description=desc,
                    images=encode_images(images),
                    category=name_to_cat[cat_name],
                ),
            )
            created_count += int(created)

        # Explicit ids were inserted; move sequences past them (PostgreSQL).
        sql_list = connection.ops.sequence_reset_sql(no_style(), [Category, Product])
        if sql_list:
            with connection.cursor() as cursor:
                for sql in sql_list:
                    cursor.execute(sql)

        self.stdout.write(
            self.style.SUCCESS(
                f"Catalog seed completed ({created_count} new products)."
            )
        )
