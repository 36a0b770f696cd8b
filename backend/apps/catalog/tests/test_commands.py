import unittest

from apps.catalog.commands import ProductFilterCommand


class ProductFilterCommandTests(unittest.TestCase):
    def test_defaults(self):
        cmd = ProductFilterCommand.from_raw({})
        self.assertIsNone(cmd.category)
        self.assertIsNone(cmd.search)
        self.assertEqual(cmd.offset, 0)
        self.assertEqual(cmd.limit, 6)

    def test_none_params(self):
        self.assertEqual(ProductFilterCommand.from_raw(None), ProductFilterCommand())

    def test_all_category_tokens_mean_no_filter(self):
        for token in ("", "all", "Все"):
            with self.subTest(token=token):
                self.assertIsNone(ProductFilterCommand.normalize_category(token))

    def test_category_match_is_exact(self):
        self.assertEqual(ProductFilterCommand.normalize_category("All"), "All")
        self.assertEqual(ProductFilterCommand.normalize_category("Розы"), "Розы")

    def test_empty_search_is_dropped(self):
        self.assertIsNone(ProductFilterCommand.normalize_search(""))
        self.assertEqual(ProductFilterCommand.normalize_search(" "), " ")
        self.assertEqual(ProductFilterCommand.normalize_search("роз"), "роз")

    def test_invalid_paging_values_fall_back(self):
        cmd = ProductFilterCommand.from_raw({"offset": "-3", "limit": "abc"})
        self.assertEqual(cmd.offset, 0)
        self.assertEqual(cmd.limit, 6)

    def test_zero_limit_means_default(self):
        self.assertEqual(ProductFilterCommand.from_raw({"limit": "0"}).limit, 6)

    def test_limit_is_capped(self):
        self.assertEqual(ProductFilterCommand.from_raw({"limit": "5000"}).limit, 100)

    def test_strings_are_parsed(self):
        cmd = ProductFilterCommand.from_raw(
            {"category": "Пионы", "search": "Сара", "offset": "2", "limit": "3"}
        )
        self.assertEqual(
            cmd, ProductFilterCommand(category="Пионы", search="Сара", offset=2, limit=3)
        )
