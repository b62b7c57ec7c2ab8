import django_filters
from django.db.models import Q

from apps.companies.models import Company


class CompanyFilter(django_filters.FilterSet):
    """
    Filtres pour la liste admin des sociétés.
    Utilisé par CompanyAdminListView et l'export Excel.
    """
    status = django_filters.ChoiceFilter(choices=Company.Status.choices)
    group = django_filters.UUIDFilter(field_name="group__id")
    no_group = django_filters.BooleanFilter(field_name="group", lookup_expr="isnull")
    paid = django_filters.BooleanFilter()
    spent = django_filters.BooleanFilter()
    search = django_filters.CharFilter(method="filter_search")
    created_after = django_filters.DateTimeFilter(field_name="created_at", lookup_expr="gte")
    created_before = django_filters.DateTimeFilter(field_name="created_at", lookup_expr="lte")

    class Meta:
        model = Company
        fields = ["status", "group", "paid", "spent"]

    def filter_search(self, queryset, name, value):
        """Recherche par nom de société, déclarant, téléphone ou code."""
        return queryset.filter(
            Q(name__icontains=value)
            | Q(registrant_name__icontains=value)
            | Q(phone_number__icontains=value)
            | Q(code__icontains=value)
        )
