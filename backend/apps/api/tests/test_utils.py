import unittest
from rest_framework import status
from apps.api.utils import error_response, message_response


class ErrorResponseTests(unittest.TestCase):
    def test_default_status_mapping_and_details(self):
        resp = error_response("NOT_FOUND", "missing", {"id": 1})
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(resp.data["code"], "NOT_FOUND")
        self.assertEqual(resp.data["error"], "missing")
        self.assertEqual(resp.data["details"], {"id": 1})

    def test_storage_error_maps_to_500(self):
        resp = error_response("storage_error", "disk I/O error")
        self.assertEqual(resp.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(resp.data, {"error": "disk I/O error", "code": "STORAGE_ERROR"})

    def test_custom_status_override(self):
        resp = error_response("UNKNOWN", "oops", http_status=status.HTTP_202_ACCEPTED)
        self.assertEqual(resp.status_code, status.HTTP_202_ACCEPTED)
        self.assertEqual(resp.data["error"], "oops")

    def test_error_response_supports_headers(self):
        resp = error_response(
            "VALIDATION_ERROR",
            "Invalid value",
            headers={"Retry-After": 5},
        )
        self.assertNotIn("details", resp.data)
        self.assertEqual(resp["Retry-After"], "5")

    def test_rejects_blank_code_and_message(self):
        with self.assertRaises(ValueError):
            error_response(" ", "msg")
        with self.assertRaises(ValueError):
            error_response("CODE", "")
        with self.assertRaises(TypeError):
            error_response("CODE", "msg", headers=["x"])


class MessageResponseTests(unittest.TestCase):
    def test_message_body(self):
        resp = message_response("Cart cleared")
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.data, {"message": "Cart cleared"})
