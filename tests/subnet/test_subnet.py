"""
Unit tests for the IPv4 subnet calculator.
Run: pytest tests/subnet/
"""
import unittest

from flask import Flask

from calctech.core.errors import CalculatorInputError
from calctech.projects.subnet.core.subnet import (
    calculate_subnet,
    cidr_to_mask,
    is_valid_ipv4,
    mask_to_cidr,
)
from calctech.projects.subnet.routes import subnet_bp


class TestAddressParsing(unittest.TestCase):

    def test_valid_addresses(self):
        self.assertTrue(is_valid_ipv4("192.168.1.100"))
        self.assertTrue(is_valid_ipv4("0.0.0.0"))

    def test_invalid_addresses(self):
        for text in ("256.1.1.1", "1.2.3", "01.2.3.4", "a.b.c.d", "1.2.3.4.5", ""):
            self.assertFalse(is_valid_ipv4(text), text)

    def test_mask_and_prefix_agree(self):
        for cidr in range(33):
            self.assertEqual(mask_to_cidr(cidr_to_mask(cidr)), cidr)

    def test_non_contiguous_mask_rejected(self):
        with self.assertRaises(CalculatorInputError):
            mask_to_cidr("255.0.255.0")


class TestCalculateSubnet(unittest.TestCase):

    def test_class_c_slash_24(self):
        result = calculate_subnet("192.168.1.100", subnet_mask="255.255.255.0")
        self.assertEqual(result["network_address"], "192.168.1.0")
        self.assertEqual(result["broadcast_address"], "192.168.1.255")
        self.assertEqual(result["first_usable_ip"], "192.168.1.1")
        self.assertEqual(result["last_usable_ip"], "192.168.1.254")
        self.assertEqual(result["usable_addresses"], 254)
        self.assertEqual(result["wildcard_mask"], "0.0.0.255")
        self.assertEqual(result["binary_subnet_mask"], "11111111.11111111.11111111.00000000")
        self.assertEqual(result["ip_class"], "C")
        self.assertEqual(result["ip_type"], "Private")
        self.assertEqual(result["cidr"], "/24")

    def test_cidr_input(self):
        result = calculate_subnet("10.0.0.5", cidr=8, use_subnet_mask=False)
        self.assertEqual(result["subnet_mask"], "255.0.0.0")
        self.assertEqual(result["broadcast_address"], "10.255.255.255")
        self.assertEqual(result["total_addresses"], 16777216)
        self.assertEqual(result["usable_addresses"], 16777214)
        self.assertEqual(result["ip_class"], "A")

    def test_single_host_has_no_usable_addresses(self):
        result = calculate_subnet("8.8.8.8", cidr=32)
        self.assertEqual(result["total_addresses"], 1)
        self.assertEqual(result["usable_addresses"], 0)
        self.assertEqual(result["ip_type"], "Public")

    def test_point_to_point_and_host_routes_have_no_usable_range(self):
        for cidr in (31, 32):
            result = calculate_subnet("10.0.0.0", cidr=cidr)
            self.assertEqual(result["usable_addresses"], 0, cidr)
            self.assertIsNone(result["first_usable_ip"], cidr)
            self.assertIsNone(result["last_usable_ip"], cidr)

    def test_slash_30_usable_range(self):
        result = calculate_subnet("10.0.0.1", cidr=30)
        self.assertEqual((result["first_usable_ip"], result["last_usable_ip"]), ("10.0.0.1", "10.0.0.2"))

    def test_loopback_has_no_class(self):
        result = calculate_subnet("127.0.0.1", cidr=8)
        self.assertEqual(result["ip_type"], "Loopback")
        self.assertEqual(result["ip_class"], "")

    def test_private_class_b_range(self):
        self.assertEqual(calculate_subnet("172.20.1.1", cidr=16)["ip_type"], "Private")
        self.assertEqual(calculate_subnet("172.32.1.1", cidr=16)["ip_type"], "Public")

    def test_invalid_address(self):
        with self.assertRaisesRegex(CalculatorInputError, "Invalid IP address format"):
            calculate_subnet("192.168.1", cidr=24)

    def test_cidr_out_of_range(self):
        with self.assertRaisesRegex(CalculatorInputError, "between 0 and 32"):
            calculate_subnet("192.168.1.1", cidr=33)


class TestSubnetApi(unittest.TestCase):

    def setUp(self):
        app = Flask(__name__)
        app.config["TESTING"] = True
        app.register_blueprint(subnet_bp, url_prefix="/subnet")
        self.client = app.test_client()

    def test_default_mask_is_used(self):
        r = self.client.get("/subnet/api?ip_address=192.168.1.100")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.get_json()["network_address"], "192.168.1.0")

    def test_cidr_mode(self):
        r = self.client.post("/subnet/api", json={
            "ip_address": "10.1.2.3",
            "use_subnet_mask": False,
            "cidr": 16,
        })
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.get_json()["network_address"], "10.1.0.0")

    def test_bad_mask_returns_400(self):
        r = self.client.get("/subnet/api?ip_address=10.1.2.3&subnet_mask=255.0.255.0")
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.get_json()["error"], "Invalid subnet mask format")


if __name__ == "__main__":
    unittest.main()
