import django_filters

from modules.orders.constants import OrderType
from modules.orders.models import Order


class OrderFilter(django_filters.FilterSet):
    email = django_filters.CharFilter(field_name="email", lookup_expr="iexact")
    reference = django_filters.CharFilter(
        field_name="order_reference", lookup_expr="icontains"
    )
    orderType = django_filters.ChoiceFilter(
        field_name="order_type", choices=OrderType.choices
    )
    created_after = django_filters.DateFilter(
        field_name="created_at", lookup_expr="date__gte"
    )
    created_before = django_filters.DateFilter(
        field_name="created_at", lookup_expr="date__lte"
    )

    class Meta:
        model = Order
        fields = ["email", "reference", "orderType", "created_after", "created_before"]
