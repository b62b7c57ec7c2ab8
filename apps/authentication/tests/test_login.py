from django.contrib.auth import get_user_model
from django.core.cache import cache
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.authentication.middleware import MAX_LOGIN_ATTEMPTS

User = get_user_model()


class LoginViewTest(APITestCase):
    def setUp(self):
        cache.clear()
        self.url = reverse("authentication:login")
        self.user = User.objects.create_user(
            username="clerk",
            email="clerk@example.com",
            password="s3cret-pass",
            name="Sara Clerk",
            role=User.Role.ACCOUNTING,
        )

    def tearDown(self):
        cache.clear()

    def test_login_with_username(self):
        response = self.client.post(self.url, {"username": "clerk", "password": "s3cret-pass"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["success"])
        user = response.data["user"]
        self.assertEqual(user["id"], str(self.user.pk))
        self.assertEqual(user["username"], "clerk")
        self.assertEqual(user["name"], "Sara Clerk")
        self.assertEqual(user["role"], "accounting")
        self.assertTrue(user["isAuthenticated"])
        self.assertNotIn("password", user)

    def test_login_with_email_or_name_case_insensitive(self):
        for identifier in ("CLERK@example.com", "sara clerk"):
            response = self.client.post(self.url, {"username": identifier, "password": "s3cret-pass"}, format="json")
            self.assertEqual(response.status_code, status.HTTP_200_OK, identifier)

    def test_login_updates_last_login(self):
        self.client.post(self.url, {"username": "clerk", "password": "s3cret-pass"}, format="json")
        self.user.refresh_from_db()
        self.assertIsNotNone(self.user.last_login)

    def test_missing_fields_returns_400(self):
        response = self.client.post(self.url, {"username": "clerk"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertTrue(response.data["error"])

    def test_wrong_password_returns_401(self):
        response = self.client.post(self.url, {"username": "clerk", "password": "nope"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data["code"], "invalid_credentials")

    def test_unknown_user_returns_401(self):
        response = self.client.post(self.url, {"username": "ghost", "password": "nope"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_inactive_account_returns_403(self):
        self.user.status = User.AccountStatus.INACTIVE
        self.user.save()
        response = self.client.post(self.url, {"username": "clerk", "password": "s3cret-pass"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["code"], "account_inactive")


class LoginRateLimitTest(APITestCase):
    def setUp(self):
        cache.clear()
        self.url = reverse("authentication:login")
        User.objects.create_user(username="clerk", password="s3cret-pass", name="Clerk")

    def tearDown(self):
        cache.clear()

    def test_lockout_after_repeated_failures(self):
        for _ in range(MAX_LOGIN_ATTEMPTS):
            response = self.client.post(self.url, {"username": "clerk", "password": "bad"}, format="json")
            self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

        response = self.client.post(self.url, {"username": "clerk", "password": "s3cret-pass"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_429_TOO_MANY_REQUESTS)
        self.assertEqual(response.json()["code"], "rate_limited")

    def test_success_resets_counter(self):
        for _ in range(MAX_LOGIN_ATTEMPTS - 1):
            self.client.post(self.url, {"username": "clerk", "password": "bad"}, format="json")
        response = self.client.post(self.url, {"username": "clerk", "password": "s3cret-pass"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)

        response = self.client.post(self.url, {"username": "clerk", "password": "bad"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_lockout_is_per_ip(self):
        for _ in range(MAX_LOGIN_ATTEMPTS):
            self.client.post(self.url, {"username": "clerk", "password": "bad"}, format="json")

        response = self.client.post(
            self.url,
            {"username": "clerk", "password": "s3cret-pass"},
            format="json",
            HTTP_X_FORWARDED_FOR="10.0.0.9",
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
