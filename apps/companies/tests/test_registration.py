from datetime import date

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.company_names.models import CompanyName
from apps.companies.models import Company
from apps.groups.models import Group
from apps.pre_registration.models import PreRegistration
from apps.system_settings.models import WebsiteSettings

ACCOUNTING_HEADERS = {"HTTP_X_USER_ROLE": "accounting", "HTTP_X_USER_USERNAME": "ledger"}


def set_registration(is_open=True, message=""):
    settings_obj = WebsiteSettings.load()
    settings_obj.is_open = is_open
    settings_obj.auto_schedule = False
    settings_obj.message = message
    settings_obj.save()
    return settings_obj


class CompanyRegistrationTest(APITestCase):
    def setUp(self):
        set_registration(is_open=True)
        self.url = reverse("companies:company-list")
        self.group = Group.objects.create(
            name="Morning", date=date(2026, 3, 2), time_from="09:00", time_to="12:00", max_companies=2,
        )

    def payload(self, **overrides):
        data = {
            "name": "Zagros Trading",
            "code": "4821",
            "phoneNumber": "0750 123 4567",
            "address": "Erbil, 100m street",
            "email": "info@zagros.example",
            "registrantName": "Karwan",
            "groupId": str(self.group.pk),
        }
        data.update(overrides)
        return data

    def test_register_creates_approved_company(self):
        response = self.client.post(self.url, self.payload(), format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["status"], Company.Status.APPROVED)
        self.assertEqual(response.data["groupName"], "Morning")
        company = Company.objects.get(code="4821")
        self.assertIsNotNone(company.approved_at)
        self.assertEqual(company.group, self.group)

    def test_closed_window_returns_503_with_admin_message(self):
        set_registration(is_open=False, message="Registration reopens on Sunday.")
        response = self.client.post(self.url, self.payload(), format="json")
        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        self.assertEqual(response.data["code"], "registration_closed")
        self.assertEqual(response.data["message"], "Registration reopens on Sunday.")
        self.assertFalse(Company.objects.exists())

    def test_staff_may_register_while_closed(self):
        set_registration(is_open=False)
        response = self.client.post(self.url, self.payload(), format="json", **ACCOUNTING_HEADERS)
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

    def test_missing_fields_are_listed(self):
        response = self.client.post(self.url, {"name": "Zagros Trading"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["errors"]["missingFields"], ["phoneNumber", "address"])

    def test_duplicate_name_and_code_rejected(self):
        self.client.post(self.url, self.payload(), format="json")
        response = self.client.post(self.url, self.payload(), format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "duplicate_registration")
        self.assertEqual(Company.objects.count(), 1)

    def test_code_held_by_another_company_rejected(self):
        self.client.post(self.url, self.payload(), format="json")
        response = self.client.post(self.url, self.payload(name="Other Name"), format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "duplicate_registration")

    def test_full_group_rejects_third_company(self):
        self.client.post(self.url, self.payload(name="A", code="1001"), format="json")
        self.client.post(self.url, self.payload(name="B", code="1002"), format="json")
        response = self.client.post(self.url, self.payload(name="C", code="1003"), format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "group_full")
        self.assertFalse(Company.objects.filter(name="C").exists())

    def test_unknown_group_rejected(self):
        response = self.client.post(
            self.url, self.payload(groupId="7f1d7f5e-0000-4000-8000-000000000000"), format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_group_required_for_new_company(self):
        response = self.client.post(
            self.url,
            {"name": "Zagros Trading", "phoneNumber": "0750 123 4567", "address": "Erbil"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["errors"]["missingFields"], ["groupId"])
        self.assertFalse(Company.objects.exists())

    def test_code_taken_from_company_name_directory(self):
        CompanyName.objects.create(name="Directory Co", code="7777")
        response = self.client.post(self.url, self.payload(name="Directory Co", code=""), format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["code"], "7777")

    def test_completing_a_pre_registration_updates_existing_company(self):
        pre_registration = PreRegistration.objects.create(
            name="Karwan", mobile_number="0750 000 0000", company_name="Zagros Trading", code="4821",
            group=self.group,
        )
        company = Company.objects.create(
            name="Zagros Trading", code="4821", registrant_name="Karwan",
            phone_number="0750 000 0000", group=self.group, pre_registration=pre_registration,
        )

        response = self.client.post(self.url, self.payload(groupId=""), format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["id"], str(company.pk))

        company.refresh_from_db()
        pre_registration.refresh_from_db()
        self.assertEqual(company.address, "Erbil, 100m street")
        self.assertEqual(company.phone_number, "0750 123 4567")
        self.assertEqual(company.group, self.group)
        self.assertEqual(pre_registration.status, PreRegistration.Status.COMPLETED)
        self.assertEqual(Company.objects.count(), 1)


class CompanyReadTest(APITestCase):
    def setUp(self):
        self.approved = Company.objects.create(name="Approved Co", registrant_name="Rebin", paid=True)
        self.pending = Company.objects.create(name="Pending Co", status=Company.Status.PENDING)

    def test_public_list_only_shows_approved(self):
        response = self.client.get(reverse("companies:company-list"))
        self.assertEqual([company["name"] for company in response.data], ["Approved Co"])

    def test_staff_list_shows_everything(self):
        response = self.client.get(reverse("companies:company-list"), **ACCOUNTING_HEADERS)
        self.assertEqual(len(response.data), 2)

    def test_public_queue_exposes_public_fields_only(self):
        response = self.client.get(reverse("companies:company-public-queue"))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)
        self.assertEqual(set(response.data[0].keys()), {"name", "userName", "paid", "createdAt"})
        self.assertEqual(response.data[0]["userName"], "Rebin")

    def test_detail_hides_unapproved_from_public(self):
        url = reverse("companies:company-detail", kwargs={"company_id": self.pending.pk})
        self.assertEqual(self.client.get(url).status_code, status.HTTP_404_NOT_FOUND)

        url = reverse("companies:company-detail", kwargs={"company_id": self.approved.pk})
        self.assertEqual(self.client.get(url).status_code, status.HTTP_200_OK)

    def test_staff_see_unapproved_detail(self):
        url = reverse("companies:company-detail", kwargs={"company_id": self.pending.pk})
        response = self.client.get(url, **ACCOUNTING_HEADERS)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["name"], "Pending Co")
