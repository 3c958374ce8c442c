from __future__ import annotations

from typing import Iterator, Protocol, TypeVar


DT = TypeVar("DT")


class DomainScale(Protocol[DT]):
    """Maps domain values onto integer coordinates in ``[0, dimension)`` and back."""

    def domain_to_coordinate(self, value: DT) -> int | None: ...

    def coordinate_to_domain(self, coordinate: int) -> DT | None: ...


class IterableScale(Protocol[DT]):
    """Enumerates ``(domain, coordinate)`` pairs, one per coordinate or per domain step."""

    def iter(self) -> Iterator[tuple[DT, int]]: ...

    def intervals(self, step: DT) -> Iterator[tuple[DT, int]]: ...
