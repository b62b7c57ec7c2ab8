from datetime import date

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.companies.models import Company
from apps.groups.models import Group

ADMIN_HEADERS = {"HTTP_X_USER_ROLE": "admin", "HTTP_X_USER_USERNAME": "admin"}


class GroupApiTest(APITestCase):
    def setUp(self):
        self.full = Group.objects.create(
            name="Full", date=date(2026, 3, 2), time_from="09:00", time_to="10:00", max_companies=1,
        )
        self.open = Group.objects.create(
            name="Open", date=date(2026, 3, 2), time_from="10:00", time_to="11:00", max_companies=3,
        )
        self.unlimited = Group.objects.create(
            name="Unlimited", date=date(2026, 3, 3), time_from="08:00", time_to="16:00",
        )
        Company.objects.create(name="Alpha", group=self.full)
        Company.objects.create(name="Beta", group=self.open)

    def test_public_list_hides_full_groups(self):
        response = self.client.get(reverse("groups:group-public"))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        names = {group["name"] for group in response.data}
        self.assertEqual(names, {"Open", "Unlimited"})

        open_group = next(group for group in response.data if group["name"] == "Open")
        self.assertEqual(open_group["registeredCount"], 1)
        self.assertEqual(open_group["remaining"], 2)
        self.assertFalse(open_group["isFull"])

        unlimited = next(group for group in response.data if group["name"] == "Unlimited")
        self.assertIsNone(unlimited["remaining"])

    def test_public_all_includes_full_groups(self):
        response = self.client.get(reverse("groups:group-public-all"))
        full = next(group for group in response.data if group["name"] == "Full")
        self.assertTrue(full["isFull"])
        self.assertEqual(full["remaining"], 0)

    def test_admin_list_requires_admin(self):
        response = self.client.get(reverse("groups:group-list"))
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

        response = self.client.get(reverse("groups:group-list"), **ADMIN_HEADERS)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 3)
        self.assertIn("createdAt", response.data[0])

    def test_create_group(self):
        response = self.client.post(
            reverse("groups:group-list"),
            {"name": "  Afternoon ", "date": "2026-03-02", "timeFrom": "13:00", "timeTo": "9:30", "maxCompanies": 10},
            format="json",
            **ADMIN_HEADERS,
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        group = response.data["group"]
        self.assertEqual(group["name"], "Afternoon")
        self.assertEqual(group["day"], "Monday")
        self.assertEqual(group["timeTo"], "09:30")
        self.assertEqual(group["registeredCount"], 0)

    def test_create_rejects_duplicate_name_and_bad_time(self):
        response = self.client.post(
            reverse("groups:group-list"),
            {"name": "open", "date": "2026-03-02", "timeFrom": "25:00", "timeTo": "10:00"},
            format="json",
            **ADMIN_HEADERS,
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("name", response.data["errors"])
        self.assertIn("timeFrom", response.data["errors"])

    def test_update_capacity(self):
        response = self.client.put(
            reverse("groups:group-detail", kwargs={"group_id": self.full.pk}),
            {"maxCompanies": 5},
            format="json",
            **ADMIN_HEADERS,
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["group"]["maxCompanies"], 5)
        self.assertFalse(response.data["group"]["isFull"])

    def test_update_date_rederives_day(self):
        self.client.put(
            reverse("groups:group-detail", kwargs={"group_id": self.open.pk}),
            {"date": "2026-03-04"},
            format="json",
            **ADMIN_HEADERS,
        )
        self.open.refresh_from_db()
        self.assertEqual(self.open.day, "Wednesday")

    def test_delete_keeps_companies_without_group(self):
        response = self.client.delete(
            reverse("groups:group-detail", kwargs={"group_id": self.full.pk}),
            **ADMIN_HEADERS,
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        company = Company.objects.get(name="Alpha")
        self.assertIsNone(company.group)

    def test_unknown_group_returns_404(self):
        response = self.client.get(
            reverse("groups:group-detail", kwargs={"group_id": "7f1d7f5e-0000-4000-8000-000000000000"}),
            **ADMIN_HEADERS,
        )
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
