from django.urls import path

from .views import GroupDetailView, GroupListCreateView, PublicAllGroupsView, PublicGroupListView

app_name = "groups"

urlpatterns = [
    path("",                  GroupListCreateView.as_view(),  name="group-list"),
    path("public/",           PublicGroupListView.as_view(),  name="group-public"),
    path("public/all/",       PublicAllGroupsView.as_view(),  name="group-public-all"),
    path("<uuid:group_id>/",   GroupDetailView.as_view(),      name="group-detail"),
]
