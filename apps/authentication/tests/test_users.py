from django.contrib.auth import get_user_model
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

User = get_user_model()

ADMIN_HEADERS = {"HTTP_X_USER_ROLE": "admin", "HTTP_X_USER_USERNAME": "admin"}


class UserManagementTest(APITestCase):
    def setUp(self):
        self.list_url = reverse("users:user-list")
        self.existing = User.objects.create_user(
            username="viewer", email="viewer@example.com", password="pass-1234", name="Viewer",
        )

    def detail_url(self, user):
        return reverse("users:user-detail", kwargs={"user_id": user.pk})

    def test_list_requires_admin(self):
        response = self.client.get(self.list_url)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

        response = self.client.get(self.list_url, HTTP_X_USER_ROLE="user", HTTP_X_USER_USERNAME="viewer")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_admin_role_with_unknown_identity_is_refused(self):
        response = self.client.get(self.list_url, HTTP_X_USER_ROLE="admin", HTTP_X_USER_USERNAME="mallory")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_list_never_exposes_passwords(self):
        response = self.client.get(self.list_url, **ADMIN_HEADERS)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)
        self.assertNotIn("password", response.data[0])

    def test_create_hashes_password_and_defaults_username(self):
        response = self.client.post(
            self.list_url,
            {"name": "Accountant", "password": "ledger-99", "role": "accounting"},
            format="json",
            **ADMIN_HEADERS,
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertNotIn("password", response.data)
        self.assertEqual(response.data["status"], "active")

        user = User.objects.get(name="Accountant")
        self.assertEqual(user.username, "Accountant")
        self.assertEqual(user.role, User.Role.ACCOUNTING)
        self.assertNotEqual(user.password, "ledger-99")
        self.assertTrue(user.check_password("ledger-99"))

    def test_create_requires_password(self):
        response = self.client.post(self.list_url, {"name": "No Pass"}, format="json", **ADMIN_HEADERS)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("password", response.data["errors"])

    def test_create_rejects_duplicate_name_and_email(self):
        response = self.client.post(
            self.list_url,
            {"name": "viewer", "email": "VIEWER@example.com", "password": "x1"},
            format="json",
            **ADMIN_HEADERS,
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("name", response.data["errors"])
        self.assertIn("email", response.data["errors"])

    def test_update_keeps_password_when_blank(self):
        response = self.client.put(
            self.detail_url(self.existing),
            {"phone": "0750 000 0000", "password": ""},
            format="json",
            **ADMIN_HEADERS,
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.existing.refresh_from_db()
        self.assertEqual(self.existing.phone, "0750 000 0000")
        self.assertTrue(self.existing.check_password("pass-1234"))

    def test_update_changes_password_and_status(self):
        self.client.put(
            self.detail_url(self.existing),
            {"password": "new-pass-5", "status": "inactive"},
            format="json",
            **ADMIN_HEADERS,
        )
        self.existing.refresh_from_db()
        self.assertTrue(self.existing.check_password("new-pass-5"))
        self.assertEqual(self.existing.status, User.AccountStatus.INACTIVE)

    def test_get_and_delete(self):
        response = self.client.get(self.detail_url(self.existing), **ADMIN_HEADERS)
        self.assertEqual(response.data["username"], "viewer")

        response = self.client.delete(self.detail_url(self.existing), **ADMIN_HEADERS)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(User.objects.filter(pk=self.existing.pk).exists())

    def test_unknown_user_returns_404(self):
        url = reverse("users:user-detail", kwargs={"user_id": "7f1d7f5e-0000-4000-8000-000000000000"})
        response = self.client.get(url, **ADMIN_HEADERS)
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
