from django.urls import path

from .views import SettingsListView, WebsiteSettingsView

app_name = "system_settings"

urlpatterns = [
    path("",          SettingsListView.as_view(),    name="settings"),
    path("website/",  WebsiteSettingsView.as_view(), name="website-settings"),
]
