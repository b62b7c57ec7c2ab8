from datetime import date
from io import BytesIO

import openpyxl
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.companies.models import Company
from apps.groups.models import Group

ADMIN_HEADERS = {"HTTP_X_USER_ROLE": "admin", "HTTP_X_USER_USERNAME": "admin"}
ACCOUNTING_HEADERS = {"HTTP_X_USER_ROLE": "accounting", "HTTP_X_USER_USERNAME": "ledger"}


class CompanyAdminTest(APITestCase):
    def setUp(self):
        self.group = Group.objects.create(
            name="Morning", date=date(2026, 3, 2), time_from="09:00", time_to="12:00", max_companies=1,
        )
        self.other_group = Group.objects.create(
            name="Evening", date=date(2026, 3, 2), time_from="18:00", time_to="20:00", max_companies=1,
        )
        self.alpha = Company.objects.create(name="Alpha", code="1111", registrant_name="Aram", group=self.group)
        self.beta = Company.objects.create(name="Beta", code="2222", phone_number="0770", paid=True)
        self.gamma = Company.objects.create(name="Gamma", status=Company.Status.PENDING, group=self.other_group)

    def detail(self, name, company):
        return reverse(f"companies:{name}", kwargs={"company_id": company.pk})

    def test_admin_list_requires_admin(self):
        url = reverse("companies:company-admin-list")
        self.assertEqual(self.client.get(url, **ACCOUNTING_HEADERS).status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(self.client.get(url, **ADMIN_HEADERS).status_code, status.HTTP_200_OK)

    def test_admin_list_filters(self):
        url = reverse("companies:company-admin-list")

        response = self.client.get(url, {"no_group": "true"}, **ADMIN_HEADERS)
        self.assertEqual([company["name"] for company in response.data], ["Beta"])

        response = self.client.get(url, {"group": str(self.group.pk)}, **ADMIN_HEADERS)
        self.assertEqual([company["name"] for company in response.data], ["Alpha"])

        response = self.client.get(url, {"status": "pending"}, **ADMIN_HEADERS)
        self.assertEqual([company["name"] for company in response.data], ["Gamma"])

        response = self.client.get(url, {"paid": "true"}, **ADMIN_HEADERS)
        self.assertEqual([company["name"] for company in response.data], ["Beta"])

        response = self.client.get(url, {"search": "aram"}, **ADMIN_HEADERS)
        self.assertEqual([company["name"] for company in response.data], ["Alpha"])

    def test_admin_list_invalid_filter(self):
        response = self.client.get(reverse("companies:company-admin-list"), {"status": "bogus"}, **ADMIN_HEADERS)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_admin_list_paginates_on_request(self):
        response = self.client.get(
            reverse("companies:company-admin-list"), {"page": 1, "page_size": 2}, **ADMIN_HEADERS,
        )
        self.assertEqual(response.data["count"], 3)
        self.assertEqual(response.data["total_pages"], 2)
        self.assertEqual(len(response.data["results"]), 2)

    def test_payment_status_patch(self):
        url = self.detail("company-status", self.alpha)
        response = self.client.patch(url, {"paid": True}, format="json", **ACCOUNTING_HEADERS)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["paid"])
        self.assertEqual(response.data["paymentDate"], timezone.localdate().isoformat())

        response = self.client.patch(
            url, {"spent": "true", "paymentDate": "2026-02-01"}, format="json", **ACCOUNTING_HEADERS,
        )
        self.alpha.refresh_from_db()
        self.assertTrue(self.alpha.spent)
        self.assertEqual(self.alpha.payment_date, date(2026, 2, 1))

    def test_payment_status_validation_and_access(self):
        url = self.detail("company-status", self.alpha)
        response = self.client.patch(url, {}, format="json", **ACCOUNTING_HEADERS)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        response = self.client.patch(url, {"paymentDate": "01/02/2026"}, format="json", **ACCOUNTING_HEADERS)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        response = self.client.patch(url, {"paid": True}, format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_approve_and_reject(self):
        response = self.client.post(self.detail("company-approve", self.gamma), **ADMIN_HEADERS)
        self.assertEqual(response.data["status"], "approved")
        self.assertIsNotNone(response.data["approvedAt"])

        response = self.client.post(
            self.detail("company-reject", self.gamma), {"reason": " Incomplete papers "}, format="json",
            **ADMIN_HEADERS,
        )
        self.assertEqual(response.data["status"], "rejected")
        self.assertEqual(response.data["rejectionReason"], "Incomplete papers")

    def test_update_moves_company_into_full_group_is_rejected(self):
        response = self.client.put(
            self.detail("company-detail", self.beta),
            {"groupId": str(self.group.pk)},
            format="json",
            **ADMIN_HEADERS,
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "group_full")

    def test_update_fields_and_clear_group(self):
        response = self.client.put(
            self.detail("company-detail", self.alpha),
            {"address": "Sulaymaniyah", "groupId": None},
            format="json",
            **ADMIN_HEADERS,
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["address"], "Sulaymaniyah")
        self.assertIsNone(response.data["groupId"])

    def test_update_rejects_taken_code(self):
        response = self.client.put(
            self.detail("company-detail", self.alpha), {"code": "2222"}, format="json", **ADMIN_HEADERS,
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_delete_and_bulk_delete(self):
        response = self.client.delete(self.detail("company-detail", self.alpha), **ADMIN_HEADERS)
        self.assertEqual(response.status_code, status.HTTP_200_OK)

        response = self.client.post(
            reverse("companies:company-bulk-delete"),
            {"ids": [str(self.beta.pk), str(self.gamma.pk)]},
            format="json",
            **ADMIN_HEADERS,
        )
        self.assertEqual(response.data["deletedCount"], 2)
        self.assertFalse(Company.objects.exists())

    def test_bulk_delete_requires_ids(self):
        response = self.client.post(
            reverse("companies:company-bulk-delete"), {"ids": []}, format="json", **ADMIN_HEADERS,
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_export_workbook(self):
        response = self.client.get(reverse("companies:company-export"), **ACCOUNTING_HEADERS)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn("attachment;", response["Content-Disposition"])

        workbook = openpyxl.load_workbook(BytesIO(response.content))
        rows = list(workbook.active.iter_rows(values_only=True))
        self.assertEqual(rows[0][0], "Company")
        self.assertEqual(len(rows), 4)
        by_name = {row[0]: row for row in rows[1:]}
        self.assertEqual(by_name["Beta"][6], "no-group")
        self.assertEqual(by_name["Alpha"][6], "Morning")
        self.assertEqual(by_name["Beta"][8], "Yes")

    def test_export_refused_to_plain_users(self):
        response = self.client.get(
            reverse("companies:company-export"), HTTP_X_USER_ROLE="user", HTTP_X_USER_USERNAME="viewer",
        )
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
