from django.urls import path

from .views import TranslationSeedView, TranslationView

app_name = "translations"

urlpatterns = [
    path("",       TranslationView.as_view(),     name="translations"),
    path("seed/",  TranslationSeedView.as_view(), name="translations-seed"),
]
