from typing import Any, Iterable, Sequence


class DirIteratorError(Exception):
    """
    Base class for errors raised by diriter itself.

    Filesystem races (entries disappearing between listing and inspection) are never
    reported through this hierarchy; they are absorbed by the iterator. Errors derived
    from this class always indicate a configuration problem on the caller's side.
    """

    pass


class InvalidFilterProviderError(DirIteratorError):
    """
    Exception raised when a filter provider cannot resolve a registered filter name.

    This is raised eagerly, either when a new provider is installed on a configuration
    that already has filters registered, or when a filter name is added that the current
    provider does not know about. It is never deferred to iteration time.

    Attributes:
        provider (Any): The provider that failed to resolve the names.
        missing (tuple[str, ...]): The filter names the provider does not implement.

    Example:
        >>> error = InvalidFilterProviderError("MyFilters", ["order-by-size"])
        >>> str(error)
        'Filter provider MyFilters does not implement: order-by-size'
        >>> error.missing
        ('order-by-size',)
    """

    def __init__(self, provider: Any, missing: Iterable[str]) -> None:
        """
        Initialize the exception with the offending provider and the unresolved names.

        Args:
            provider (Any): The filter provider that was being validated.
            missing (Iterable[str]): Filter names that could not be resolved.
        """
        self.provider = provider
        self.missing = tuple(missing)
        super().__init__(f"Filter provider {provider} does not implement: {', '.join(self.missing)}")


class InvalidFilterResultError(DirIteratorError):
    """
    Exception raised when a filter breaks the filter contract.

    A filter must return a sequence that is a subsequence of its input: it may drop and
    reorder entries but may never introduce an entry it was not given. This exception is
    raised at the point the offending filter runs.

    Attributes:
        filter_name (str): Name of the filter that returned the invalid result.
        unexpected (tuple): Entries returned by the filter that were not in its input.
            Empty when the filter did not return a sequence at all.

    Example:
        >>> error = InvalidFilterResultError("order-by-name", ["/tmp/other"])
        >>> str(error)
        'Filter order-by-name returned unexpected entries: /tmp/other'
    """

    def __init__(self, filter_name: str, unexpected: Sequence[Any] = (), message: str = "") -> None:
        """
        Initialize the exception.

        Args:
            filter_name (str): Name of the offending filter.
            unexpected (Sequence[Any], optional): The entries that were not in the filter's input.
            message (str, optional): Explicit description. When omitted, a message listing the
                unexpected entries is built.
        """
        self.filter_name = filter_name
        self.unexpected = tuple(unexpected)
        if not message:
            message = f"Filter {filter_name} returned unexpected entries: " + ",".join(
                str(entry) for entry in self.unexpected
            )
        super().__init__(message)
