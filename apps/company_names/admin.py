from django.contrib import admin

from .models import CompanyName


@admin.register(CompanyName)
class CompanyNameAdmin(admin.ModelAdmin):
    list_display = ["name", "code", "contact_name", "mobile_number", "created_at"]
    search_fields = ["name", "code", "contact_name", "mobile_number"]
    readonly_fields = ["id", "created_at", "updated_at"]
    ordering = ["name"]
    list_per_page = 50
