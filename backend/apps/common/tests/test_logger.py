import logging
import unittest

from apps.common.logger import AppLogger, get_logger


class AppLoggerTests(unittest.TestCase):
    def test_bind_merges_context_without_mutating_parent(self):
        base = get_logger("apps.tests.logger").bind(component="carts")
        child = base.bind(cart_key="default")
        self.assertEqual(base.context, {"component": "carts"})
        self.assertEqual(child.context, {"component": "carts", "cart_key": "default"})

    def test_message_renders_context_pairs(self):
        log = get_logger("apps.tests.logger").bind(component="carts")
        with self.assertLogs("apps.tests.logger", level="INFO") as captured:
            log.info("Cart cleared", removed=3)
        self.assertEqual(captured.records[0].getMessage(), "Cart cleared | component=carts removed=3")
        self.assertEqual(captured.records[0].context, {"component": "carts", "removed": 3})

    def test_disabled_level_is_skipped(self):
        log = AppLogger("apps.tests.logger.quiet")
        logging.getLogger("apps.tests.logger.quiet").setLevel(logging.ERROR)
        self.addCleanup(logging.getLogger("apps.tests.logger.quiet").setLevel, logging.NOTSET)
        self.assertFalse(log.is_enabled_for(logging.INFO))
        with self.assertLogs("apps.tests.logger.quiet", level="ERROR") as captured:
            log.info("skipped")
            log.error("kept")
        self.assertEqual([r.getMessage() for r in captured.records], ["kept"])
