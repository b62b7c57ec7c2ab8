import json
import shutil
import tempfile
from pathlib import Path

from django.test import SimpleTestCase, override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.translations.models import TranslationSet
from apps.translations.services import deep_merge

ADMIN_HEADERS = {"HTTP_X_USER_ROLE": "admin", "HTTP_X_USER_USERNAME": "admin"}


class DeepMergeTest(SimpleTestCase):
    def test_override_wins_and_nested_keys_are_merged(self):
        base = {"nav": {"home": "Home", "queue": "Queue"}, "title": "Portal"}
        override = {"nav": {"home": "Start"}, "footer": "Bye"}
        merged = deep_merge(base, override)
        self.assertEqual(merged, {
            "nav": {"home": "Start", "queue": "Queue"},
            "title": "Portal",
            "footer": "Bye",
        })
        self.assertEqual(base["nav"]["home"], "Home")


class TranslationApiTest(APITestCase):
    def setUp(self):
        self.url = reverse("translations:translations")

    def test_get_is_public_and_never_cached(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {"en": {}, "ku": {}, "ar": {}})
        self.assertIn("no-store", response["Cache-Control"])

    def test_put_requires_admin(self):
        response = self.client.put(self.url, {"en": {"title": "Hi"}}, format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_put_replaces_given_languages_only(self):
        TranslationSet.objects.create(ar={"title": "مرحبا"})
        response = self.client.put(self.url, {"en": {"title": "Hello"}}, format="json", **ADMIN_HEADERS)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["en"], {"title": "Hello"})
        self.assertEqual(response.data["ar"], {"title": "مرحبا"})

    def test_put_validation(self):
        response = self.client.put(self.url, {"fr": {}}, format="json", **ADMIN_HEADERS)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        response = self.client.put(self.url, {"en": "text"}, format="json", **ADMIN_HEADERS)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)


class TranslationSeedTest(APITestCase):
    def setUp(self):
        self.locale_dir = Path(tempfile.mkdtemp())
        (self.locale_dir / "en.json").write_text(
            json.dumps({"nav": {"home": "Home", "queue": "Queue"}}), encoding="utf-8",
        )
        (self.locale_dir / "ku.json").write_text("{broken", encoding="utf-8")
        self.url = reverse("translations:translations-seed")

    def tearDown(self):
        shutil.rmtree(self.locale_dir, ignore_errors=True)

    def test_seed_keeps_database_values(self):
        TranslationSet.objects.create(en={"nav": {"home": "Start"}})

        with override_settings(TRANSLATIONS_LOCALE_DIR=str(self.locale_dir)):
            response = self.client.post(self.url, **ADMIN_HEADERS)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["success"])
        self.assertEqual(response.data["en"], 1)
        self.assertEqual(response.data["ku"], 0)
        self.assertEqual(response.data["ar"], 0)

        obj = TranslationSet.load()
        self.assertEqual(obj.en, {"nav": {"home": "Start", "queue": "Queue"}})
        self.assertIsNotNone(obj.seeded_at)

    def test_seed_requires_admin(self):
        response = self.client.post(self.url)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
