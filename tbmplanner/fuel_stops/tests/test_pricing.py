#!/usr/bin/env python3
# tbmplanner/fuel_stops/tests/test_pricing.py
import json
import unittest
from unittest.mock import MagicMock

import requests

from tbmplanner.fuel_stops.pricing import FuelPriceClient, parse_price

def _response(status_code=200, payload=None, bad_json=False):
    response = MagicMock()
    response.status_code = status_code
    if bad_json:
        response.json.side_effect = json.JSONDecodeError("Expecting value", "<html>", 0)
    else:
        response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(f"{status_code} error")
    return response

class TestParsePrice(unittest.TestCase):
    def test_member_and_retail(self):
        price = parse_price("kbgd", {"fbo": "Hutchinson Aviation", "retailPrice": "6.45", "memberPrice": 5.95})
        self.assertEqual(price.ident, "KBGD")
        self.assertEqual(price.fbo, "Hutchinson Aviation")
        self.assertEqual(price.retail_price, 6.45)
        self.assertTrue(price.is_member)
        self.assertEqual(price.effective_price, 5.95)
        self.assertEqual(price.source, "member")

    def test_retail_only(self):
        price = parse_price("KICT", {"fbo": "Yingling", "retailPrice": "$7.10"})
        self.assertFalse(price.is_member)
        self.assertEqual(price.effective_price, 7.10)

    def test_no_data(self):
        self.assertIsNone(parse_price("KICT", {}))
        self.assertIsNone(parse_price("KICT", None))
        self.assertIsNone(parse_price("KICT", {"fbo": "Closed", "retailPrice": "N/A", "memberPrice": 0}))

class TestFuelPriceClient(unittest.TestCase):
    def setUp(self):
        self.session = MagicMock()
        self.client = FuelPriceClient(url="https://fuel.example/price/", session=self.session, max_workers=2)

    def test_lookup(self):
        self.session.get.return_value = _response(payload={"fbo": "Signature", "retailPrice": 8.25})
        price = self.client.lookup("kden")
        self.assertEqual(price.effective_price, 8.25)
        args, kwargs = self.session.get.call_args
        self.assertEqual(args[0], "https://fuel.example/price/KDEN")
        self.assertEqual(kwargs["timeout"], 15)

    def test_not_found(self):
        self.session.get.return_value = _response(status_code=404)
        self.assertIsNone(self.client.lookup("KXXX"))

    def test_failures_degrade_to_none(self):
        self.session.get.return_value = _response(status_code=503)
        self.assertIsNone(self.client.lookup("KDEN"))
        self.session.get.return_value = _response(bad_json=True)
        self.assertIsNone(self.client.lookup("KDEN"))
        self.session.get.side_effect = requests.exceptions.ConnectionError("down")
        self.assertIsNone(self.client.lookup("KDEN"))

    def test_lookup_many_fills_cache(self):
        payloads = {
            "https://fuel.example/price/KAAA": {"retailPrice": 6.0},
            "https://fuel.example/price/KBBB": {"retailPrice": 6.5, "memberPrice": 6.1},
            "https://fuel.example/price/KCCC": {},
        }
        self.session.get.side_effect = lambda url, timeout=None: _response(payload=payloads[url])
        cache = {}
        prices = self.client.lookup_many(["KAAA", "kbbb", "KCCC", "KAAA"], cache=cache)

        self.assertEqual(set(prices), {"KAAA", "KBBB", "KCCC"})
        self.assertEqual(prices["KAAA"].effective_price, 6.0)
        self.assertTrue(prices["KBBB"].is_member)
        self.assertIsNone(prices["KCCC"])
        self.assertEqual(self.session.get.call_count, 3)

        # Cached answers, including "no data", are not fetched again
        again = self.client.lookup_many(["KBBB", "KCCC"], cache=cache)
        self.assertEqual(self.session.get.call_count, 3)
        self.assertIs(again["KBBB"], prices["KBBB"])

if __name__ == '__main__':
    unittest.main()
