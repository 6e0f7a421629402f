import os
from unittest.mock import patch

from django.test import SimpleTestCase
from django.urls import reverse

from rupeedemo import settings as project_settings


class ShowcaseViewTests(SimpleTestCase):
    def test_sample_amounts(self):
        response = self.client.get(reverse("showcase"))
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "₹1,23,456.79")
        self.assertContains(response, "-₹25 Lakh")
        self.assertContains(response, "(₹25,00,000.00)")

    def test_requested_amount(self):
        response = self.client.get(reverse("showcase"), {"amount": "2500000"})
        self.assertContains(response, "₹25L")
        self.assertContains(response, "Twenty Five Lakh Rupees")
        self.assertContains(response, "<td>lakhs</td>", html=False)

    def test_invalid_amount_renders_as_zero(self):
        with self.assertLogs("desi_currency", level="WARNING"):
            response = self.client.get(reverse("showcase"), {"amount": "lots"})
        self.assertContains(response, "₹0.00")
        self.assertContains(response, "below a lakh")


class SettingsTests(SimpleTestCase):
    def test_debug_defaults_to_true(self):
        environ_without_debug = {k: v for k, v in os.environ.items() if k != "DEBUG"}
        with patch.dict(os.environ, environ_without_debug, clear=True):
            self.assertIs(project_settings.env("DEBUG"), True)

    def test_debug_read_from_environment(self):
        with patch.dict(os.environ, {"DEBUG": "off"}):
            self.assertIs(project_settings.env("DEBUG"), False)
