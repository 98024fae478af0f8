"""Builders de payload para a API v2 do Beehiiv.

- filters: achatamento de filtros e active_filters
- custom_fields: SubmissionRecord -> mapa de custom fields
- subscription: payload completo de criação de inscrito
"""

from api.payload_builders.beehiiv.custom_fields import map_to_custom_fields
from api.payload_builders.beehiiv.filters import (
    FlattenedFilters,
    category_field_name,
    flatten_filters,
)
from api.payload_builders.beehiiv.subscription import (
    SubscriptionPayloadBuilder,
    to_custom_field_list,
)

__all__ = [
    "FlattenedFilters",
    "SubscriptionPayloadBuilder",
    "category_field_name",
    "flatten_filters",
    "map_to_custom_fields",
    "to_custom_field_list",
]
