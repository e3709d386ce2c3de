"""Filters that decide the order in which a directory's children are visited."""

from .filter_chain import FilterChain
from .providers import (
    BaseFilterProvider,
    CompositeFilterProvider,
    MappingFilterProvider,
    NamespaceFilterProvider,
    StandardFilterProvider,
    normalize_filter_name,
)
from .standard_filters import StandardFilters, preserve_sort_by

__all__ = [
    "BaseFilterProvider",
    "CompositeFilterProvider",
    "FilterChain",
    "MappingFilterProvider",
    "NamespaceFilterProvider",
    "StandardFilterProvider",
    "StandardFilters",
    "normalize_filter_name",
    "preserve_sort_by",
]
