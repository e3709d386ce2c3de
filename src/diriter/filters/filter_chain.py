"""Ordered chain of named filters applied to a directory's children."""

from collections.abc import Sequence as SequenceABC
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from diriter.exceptions import InvalidFilterResultError
from diriter.filters.providers import BaseFilterProvider, StandardFilterProvider


class FilterChain:
    """A named, ordered list of filters resolved against a filter provider.

    Filters run in the order they were added, each consuming the previous one's
    output. The last filter added is therefore the primary sort criterion and the
    earlier ones act as tie-breakers.

    Attributes:
        provider (BaseFilterProvider): Resolver for the registered names.

    Example:
        >>> chain = FilterChain()
        >>> chain.add("order-by-name")
        >>> chain.add("files-first")
        >>> chain.names
        ('order-by-name', 'files-first')
    """

    def __init__(self, provider: Optional[BaseFilterProvider] = None, names: Iterable[str] = ()) -> None:
        self._provider: BaseFilterProvider = provider if provider is not None else StandardFilterProvider()
        self._names: List[str] = []
        for name in names:
            self.add(name)

    @property
    def provider(self) -> BaseFilterProvider:
        return self._provider

    @provider.setter
    def provider(self, provider: BaseFilterProvider) -> None:
        """Install a new provider after checking it resolves every registered name.

        Raises:
            TypeError: If provider is not a BaseFilterProvider.
            InvalidFilterProviderError: If provider misses any registered name. The
                previous provider stays installed.
        """
        if not isinstance(provider, BaseFilterProvider):
            raise TypeError(f"Expected a BaseFilterProvider, got {type(provider).__name__}")
        provider.validate(self._names)
        self._provider = provider

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(self._names)

    def add(self, name: str) -> None:
        """Append a filter to the chain.

        Raises:
            InvalidFilterProviderError: If the current provider does not implement name.
        """
        self._provider.validate([name])
        self._names.append(name)

    def __len__(self) -> int:
        return len(self._names)

    def apply(self, paths: Sequence[Path]) -> List[Path]:
        """Run every filter in order and return the final ordering.

        Each filter receives its own copy of the current list, so a filter that
        mutates its argument cannot corrupt the contract check.

        Raises:
            InvalidFilterResultError: If a filter returns something other than a
                sequence, or returns entries that were not in its input.
        """
        current = list(paths)
        for name in self._names:
            result = self._provider.resolve(name)(list(current))
            if not isinstance(result, SequenceABC) or isinstance(result, (str, bytes)):
                raise InvalidFilterResultError(
                    name, message=f"Filter {name} did not return a sequence (got {type(result).__name__})"
                )
            allowed = set(current)
            unexpected = [entry for entry in result if entry not in allowed]
            if unexpected:
                raise InvalidFilterResultError(name, unexpected)
            current = list(result)
        return current
