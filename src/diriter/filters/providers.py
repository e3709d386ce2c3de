"""Filter providers resolve symbolic filter names to filter functions.

A configuration only stores filter names; the provider installed on it decides what
each name means. Swapping the provider is how callers plug in their own orderings.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from diriter.exceptions import InvalidFilterProviderError
from diriter.filters.standard_filters import StandardFilters
from diriter.types import FilterFunction


def normalize_filter_name(name: str) -> str:
    """Map a filter name to its canonical, underscore-separated form.

    Example:
        >>> normalize_filter_name("order-by-mtime-desc")
        'order_by_mtime_desc'
    """
    if not isinstance(name, str):
        raise TypeError(f"Filter names must be strings, got {type(name).__name__}")
    return name.strip().replace("-", "_")


class BaseFilterProvider(ABC):
    """Abstract base class for filter-name resolvers.

    Subclasses implement get_filter(); validation and error reporting are shared.
    """

    @abstractmethod
    def get_filter(self, name: str) -> Optional[FilterFunction]:
        """Return the filter registered under the canonical name, or None.

        Args:
            name: A filter name already passed through normalize_filter_name().
        """
        pass

    def has_filter(self, name: str) -> bool:
        """Check whether name resolves to a callable filter."""
        return callable(self.get_filter(normalize_filter_name(name)))

    def resolve(self, name: str) -> FilterFunction:
        """Return the filter function for name.

        Raises:
            InvalidFilterProviderError: If this provider does not implement name.
        """
        func = self.get_filter(normalize_filter_name(name))
        if not callable(func):
            raise InvalidFilterProviderError(self, [name])
        return func

    def validate(self, names: Iterable[str]) -> None:
        """Ensure every name resolves, reporting all missing names at once.

        Raises:
            InvalidFilterProviderError: If any name cannot be resolved.
        """
        missing = [name for name in names if not self.has_filter(name)]
        if missing:
            raise InvalidFilterProviderError(self, missing)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class NamespaceFilterProvider(BaseFilterProvider):
    """Resolve filter names against the attributes of a class, module or object.

    Attributes:
        namespace (Any): The object whose callable attributes are the filters.

    Example:
        >>> class MyFilters:
        ...     @staticmethod
        ...     def shortest_name_first(paths):
        ...         return sorted(paths, key=lambda p: len(p.name))
        >>> NamespaceFilterProvider(MyFilters).has_filter("shortest-name-first")
        True
    """

    def __init__(self, namespace: Any) -> None:
        self.namespace = namespace

    def get_filter(self, name: str) -> Optional[FilterFunction]:
        # Private helpers of the namespace are never exposed as filters.
        if name.startswith("_"):
            return None
        return getattr(self.namespace, name, None)

    def __repr__(self) -> str:
        label = getattr(self.namespace, "__name__", type(self.namespace).__name__)
        return f"{self.__class__.__name__}({label})"


class StandardFilterProvider(NamespaceFilterProvider):
    """The default provider, exposing StandardFilters."""

    def __init__(self) -> None:
        super().__init__(StandardFilters)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class MappingFilterProvider(BaseFilterProvider):
    """Resolve filter names from an explicit name-to-function registry.

    Example:
        >>> provider = MappingFilterProvider({"noop": list})
        >>> provider.add_filter("newest-first", lambda paths: list(paths))
        >>> sorted(provider.names())
        ['newest_first', 'noop']
    """

    def __init__(self, filters: Optional[Mapping[str, FilterFunction]] = None) -> None:
        self._filters: Dict[str, FilterFunction] = {}
        for name, func in (filters or {}).items():
            self.add_filter(name, func)

    def add_filter(self, name: str, func: FilterFunction) -> None:
        """Register func under name, replacing any previous registration.

        Raises:
            TypeError: If func is not callable.
        """
        if not callable(func):
            raise TypeError(f"Filter {name!r} must be callable, got {type(func).__name__}")
        self._filters[normalize_filter_name(name)] = func

    def get_filter(self, name: str) -> Optional[FilterFunction]:
        return self._filters.get(name)

    def names(self) -> List[str]:
        """Return the canonical names of all registered filters."""
        return list(self._filters)


class CompositeFilterProvider(BaseFilterProvider):
    """Combine several providers; the first one that resolves a name wins.

    This makes it easy to extend the standard filters with custom ones without
    reimplementing them.

    Example:
        >>> extra = MappingFilterProvider({"largest-first": lambda paths: list(paths)})
        >>> provider = CompositeFilterProvider([extra, StandardFilterProvider()])
        >>> provider.has_filter("largest-first") and provider.has_filter("order-by-name")
        True
    """

    def __init__(self, providers: Sequence[BaseFilterProvider]) -> None:
        """Initialize the composite.

        Raises:
            ValueError: If providers is empty.
            TypeError: If any element is not a BaseFilterProvider.
        """
        if not providers:
            raise ValueError("At least one filter provider must be given")
        for i, provider in enumerate(providers):
            if not isinstance(provider, BaseFilterProvider):
                raise TypeError(f"Provider at index {i} must implement BaseFilterProvider, got {type(provider)}")
        self.providers: List[BaseFilterProvider] = list(providers)

    def get_filter(self, name: str) -> Optional[FilterFunction]:
        for provider in self.providers:
            func = provider.get_filter(name)
            if callable(func):
                return func
        return None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({', '.join(repr(p) for p in self.providers)})"
