"""
Tests for the Ge'ez HTTP API
=============================

Usage:
    python -m pytest tests/test_server.py -v
"""
import sys
import os
import unittest
from unittest.mock import patch

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient

from geez.server import app, ServerConfig


class TestEndpoints(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(app)

    def test_glyphs(self):
        data = self.client.get("/api/glyphs").json()
        self.assertEqual(len(data["ones"]), 9)
        self.assertEqual(len(data["tens"]), 9)
        self.assertEqual([g["symbol"] for g in data["multipliers"]], ["፻", "፼"])

    def test_encode(self):
        resp = self.client.get("/api/encode/123")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"number": 123, "numeral": "፻፳፫"})

    def test_encode_zero(self):
        resp = self.client.get("/api/encode/0")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["detail"]["kind"], "no_representation")

    def test_encode_not_a_number(self):
        resp = self.client.get("/api/encode/abc")
        self.assertEqual(resp.status_code, 422)

    def test_decode(self):
        resp = self.client.post("/api/decode", json={"numeral": "፼፼"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["number"], 100_000_000)

    def test_decode_structural_error(self):
        resp = self.client.post("/api/decode", json={"numeral": "፩፲"})
        self.assertEqual(resp.status_code, 400)
        detail = resp.json()["detail"]
        self.assertEqual(detail["kind"], "tens_after_ones")
        self.assertEqual(detail["position"], 2)
        self.assertEqual(detail["glyph"], "፲")

    def test_decode_empty(self):
        resp = self.client.post("/api/decode", json={"numeral": "  "})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["detail"]["kind"], "empty_input")

    def test_validate(self):
        ok = self.client.post("/api/validate", json={"numeral": "፻፳፫"}).json()
        self.assertTrue(ok["valid"])
        self.assertIsNone(ok["message"])

        bad = self.client.post("/api/validate", json={"numeral": "፫፬"}).json()
        self.assertFalse(bad["valid"])
        self.assertEqual(bad["kind"], "duplicate_ones")
        self.assertEqual(bad["position"], 2)
        self.assertIn("Multiple ones digits", bad["message"])

    def test_myriad(self):
        data = self.client.get("/api/myriad/2").json()
        self.assertEqual(data["value"], 100_000_000)
        self.assertEqual(data["numeral"], "፼፼")

    def test_myriad_invalid(self):
        self.assertEqual(self.client.get("/api/myriad/0").status_code, 400)

    def test_myriad_beyond_print_limit(self):
        resp = self.client.get("/api/myriad/1100")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["detail"]["kind"], "number_too_large")
        self.assertEqual(self.client.get("/api/myriad/1000").status_code, 200)

    def test_decode_beyond_print_limit(self):
        resp = self.client.post("/api/decode", json={"numeral": "፼" * 1100})
        self.assertEqual(resp.status_code, 400)
        detail = resp.json()["detail"]
        self.assertEqual(detail["kind"], "number_too_large")
        self.assertIn("4,401 digits", detail["message"])


class TestServerConfig(unittest.TestCase):

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = ServerConfig.from_env()
        self.assertEqual(config.host, "127.0.0.1")
        self.assertEqual(config.port, 8000)

    def test_from_env(self):
        with patch.dict(os.environ, {"GEEZ_HOST": "0.0.0.0", "GEEZ_PORT": "9001"}):
            config = ServerConfig.from_env()
        self.assertEqual(config.host, "0.0.0.0")
        self.assertEqual(config.port, 9001)

    def test_bad_port(self):
        with patch.dict(os.environ, {"GEEZ_PORT": "eighty"}):
            with self.assertRaises(ValueError):
                ServerConfig.from_env()


if __name__ == "__main__":
    unittest.main()
