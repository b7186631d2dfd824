"""Ordered, queryable group of models or plain values."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping, MutableSequence
import logging
from typing import Any

from .exceptions import InvalidArgumentError

LOGGER = logging.getLogger(__name__)

_MISSING: Any = object()


def _identifier_of(entry: Any) -> Any:
    """Return the ``uuid`` of an entry, reading mapping keys for plain dicts."""
    if isinstance(entry, Mapping):
        return entry.get("uuid", _MISSING)
    return getattr(entry, "uuid", _MISSING)


def _matches(entry: Any, item: Any) -> bool:
    return entry is item or entry == item


class Collection:
    """Array-like wrapper around a list of entries.

    The list passed to the constructor is used as-is, not copied: appending
    to it from outside is visible through ``models`` and ``length``, and
    ``add``/``remove`` mutate the caller's list. Entries may repeat.

    ``map``/``filter``/``find``/``find_index`` call ``fn(value, index, models)``
    and ``reduce`` calls ``fn(acc, value, index, models)``, where ``models`` is
    the live backing list.
    """

    def __init__(self, models: MutableSequence[Any] | None = None) -> None:
        if models is None:
            models = []
        elif not isinstance(models, MutableSequence):
            LOGGER.debug(
                "collection.invalid_argument",
                extra={
                    "event": "collection.invalid_argument",
                    "argument_type": type(models).__name__,
                },
            )
            raise InvalidArgumentError("Constructor parameter must be a list")
        self._models = models

    @property
    def models(self) -> MutableSequence[Any]:
        """The backing list, shared with whoever constructed the collection."""
        return self._models

    @property
    def length(self) -> int:
        return len(self._models)

    def __len__(self) -> int:
        return len(self._models)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._models)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._models!r})"

    def add(self, *items: Any) -> None:
        """Append each item, in the order given."""
        self._models.extend(items)

    def remove(self, item: Any) -> None:
        """Remove every entry that is or equals ``item``, keeping order."""
        models = self._models
        # Back to front so earlier indexes stay valid.
        for index in range(len(models) - 1, -1, -1):
            if _matches(models[index], item):
                del models[index]

    def get(self, id: Any) -> Any:
        """Return the first entry whose ``uuid`` equals ``id``, else ``None``."""
        for entry in self._models:
            identifier = _identifier_of(entry)
            if identifier is not _MISSING and identifier == id:
                return entry
        return None

    def map(self, fn: Callable[[Any, int, MutableSequence[Any]], Any]) -> Collection:
        """Return a new collection holding ``fn``'s result for every entry."""
        models = self._models
        return Collection([fn(value, index, models) for index, value in enumerate(models)])

    def filter(self, fn: Callable[[Any, int, MutableSequence[Any]], Any]) -> Collection:
        """Return a new collection of entries for which ``fn`` is truthy."""
        models = self._models
        return Collection(
            [value for index, value in enumerate(models) if fn(value, index, models)]
        )

    def reduce(
        self,
        fn: Callable[[Any, Any, int, MutableSequence[Any]], Any],
        initial: Any = _MISSING,
    ) -> Any:
        """Left-fold the entries.

        Without ``initial`` the first entry seeds the accumulator and folding
        starts at the second entry; an empty collection then has nothing to
        return and raises ``InvalidArgumentError``.
        """
        models = self._models
        start = 0
        if initial is _MISSING:
            if not models:
                raise InvalidArgumentError(
                    "Reduce of empty collection with no initial value"
                )
            accumulator = models[0]
            start = 1
        else:
            accumulator = initial
        for index in range(start, len(models)):
            accumulator = fn(accumulator, models[index], index, models)
        return accumulator

    def find(self, fn: Callable[[Any, int, MutableSequence[Any]], Any]) -> Any:
        """Return the first entry for which ``fn`` is truthy, else ``None``."""
        models = self._models
        for index, value in enumerate(models):
            if fn(value, index, models):
                return value
        return None

    def find_index(self, fn: Callable[[Any, int, MutableSequence[Any]], Any]) -> int:
        """Return the index of the first entry for which ``fn`` is truthy, else -1."""
        models = self._models
        for index, value in enumerate(models):
            if fn(value, index, models):
                return index
        return -1

    def index_of(self, item: Any) -> int:
        """Return the index of the first entry that is or equals ``item``, else -1."""
        for index, value in enumerate(self._models):
            if _matches(value, item):
                return index
        return -1
