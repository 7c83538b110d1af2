"""Chemical catalogs.

A catalog fixes the order of chemicals: index ``i`` refers to the same
chemical in every gas built on that catalog. Gases keep a reference to
their catalog and mass fractions are stored aligned with it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, Mapping, Sequence, Tuple

from gasflows.exceptions import CatalogError, CompositionError
from gasflows.models import Chemical


@dataclass(frozen=True)
class ChemicalCatalog:
    chemicals: Tuple[Chemical, ...]
    _positions: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        chemicals = tuple(self.chemicals)
        positions: Dict[str, int] = {}
        for index, chemical in enumerate(chemicals):
            if chemical.name in positions:
                raise CatalogError(f"Duplicate chemical in catalog: {chemical.name}")
            positions[chemical.name] = index
        object.__setattr__(self, "chemicals", chemicals)
        object.__setattr__(self, "_positions", positions)

    def __len__(self) -> int:
        return len(self.chemicals)

    def __iter__(self) -> Iterator[Chemical]:
        return iter(self.chemicals)

    def __getitem__(self, index: int) -> Chemical:
        return self.chemicals[index]

    def __contains__(self, name: object) -> bool:
        return name in self._positions

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(chemical.name for chemical in self.chemicals)

    def index(self, name: str) -> int:
        """Return the catalog position of ``name``."""
        try:
            return self._positions[name]
        except KeyError:
            raise CatalogError(f"Unknown chemical: {name}") from None

    def get(self, name: str) -> Chemical | None:
        position = self._positions.get(name)
        if position is None:
            return None
        return self.chemicals[position]

    def composition(self, fractions: Mapping[str, float]) -> Tuple[float, ...]:
        """Map a ``{name: fraction}`` mapping onto catalog order.

        Chemicals absent from ``fractions`` get 0.0. Names the catalog does
        not know raise ``CompositionError``.
        """
        unknown = [str(name) for name in fractions if name not in self._positions]
        if unknown:
            raise CompositionError(f"Chemicals not in catalog: {', '.join(unknown)}")
        try:
            return tuple(float(fractions.get(name, 0.0)) for name in self.names)
        except (TypeError, ValueError) as exc:
            raise CompositionError(f"Invalid mass fraction: {exc}") from exc

    def align(self, fractions: Sequence[float] | Mapping[str, float]) -> Tuple[float, ...]:
        """Return mass fractions in catalog order from a sequence or a mapping."""
        if isinstance(fractions, Mapping):
            return self.composition(fractions)
        try:
            aligned = tuple(float(value) for value in fractions)
        except (TypeError, ValueError) as exc:
            raise CompositionError(f"Invalid mass fraction: {exc}") from exc
        if len(aligned) != len(self.chemicals):
            raise CompositionError(
                f"Expected {len(self.chemicals)} mass fractions, got {len(aligned)}"
            )
        return aligned


DEFAULT_CATALOG = ChemicalCatalog(
    (
        Chemical("C1", 0.01604, 1.303),
        Chemical("C2", 0.03007, 1.188),
        Chemical("C3", 0.044097, 1.127),
        Chemical("C4", 0.05812, 1.092),
        Chemical("C5", 0.07215, 1.074),
        Chemical("C6", 0.08617848, 1.062),
        Chemical("C7", 0.100205, 1.053),
        Chemical("N2", 0.0280134, 1.4),
        Chemical("H2S", 0.034082, 1.32),
        Chemical("CO2", 0.04401, 1.28),
        Chemical("H2O", 0.01801528, 1.33),
    )
)
