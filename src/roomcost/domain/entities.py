"""Domain entities: the room and its material layers."""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from .coercion import (
    coerce_bool,
    coerce_non_negative,
    coerce_optional,
    coerce_wall_count,
)
from .value_objects import Dimension

logger = logging.getLogger(__name__)

__all__ = ["LayerDefaults", "MaterialLayer", "Room"]


@dataclass(frozen=True)
class LayerDefaults:
    """Field values given to a freshly added layer.

    Attributes:
        wall_count: Number of the four walls covered (0-4).
        applies_floor: Whether the layer covers the floor.
        applies_ceiling: Whether the layer covers the ceiling.
        unit_price: Price per square meter.
        name_prefix: New layers are named ``"<prefix> <id>"``.
    """

    wall_count: int = 4
    applies_floor: bool = True
    applies_ceiling: bool = True
    unit_price: float = 0.0
    name_prefix: str = "Layer"

    def __post_init__(self) -> None:
        if not 0 <= self.wall_count <= 4:
            raise ValueError("wall_count must be between 0 and 4")
        if self.unit_price < 0:
            raise ValueError("unit_price cannot be negative")


# Field name -> coercion used when the field is written.
_FIELD_COERCERS: dict[str, Callable[[Any], Any]] = {
    "name": lambda value: "" if value is None else str(value),
    "unit_price": coerce_non_negative,
    "wall_count": coerce_wall_count,
    "applies_floor": coerce_bool,
    "applies_ceiling": coerce_bool,
    "package_unit_price": coerce_optional,
    "package_area": coerce_optional,
    "exclusion_area": coerce_non_negative,
}


@dataclass
class MaterialLayer:
    """A material or finish applied to some of the room's surfaces.

    Wall coverage is a count of walls rather than specific walls; the cost
    engine multiplies it by the average wall area.

    When ``package_area`` is positive and ``package_unit_price`` is set, the
    package fields are the price input and ``unit_price`` is derived from
    them, replacing whatever was entered manually.

    Attributes:
        id: Stable identifier assigned by the owning room.
        name: Display name.
        unit_price: Price per square meter.
        wall_count: Number of walls covered, 0-4.
        applies_floor: Whether the floor is covered.
        applies_ceiling: Whether the ceiling is covered.
        package_unit_price: Price of one package, if buying by the package.
        package_area: Square meters covered by one package.
        exclusion_area: Square meters subtracted for doors, windows, etc.
    """

    id: int
    name: str = ""
    unit_price: float = 0.0
    wall_count: int = 4
    applies_floor: bool = True
    applies_ceiling: bool = True
    package_unit_price: float | None = None
    package_area: float | None = None
    exclusion_area: float = 0.0

    def apply(self, patch: Mapping[str, Any]) -> None:
        """Write the given fields, coercing each value fail-soft.

        Unknown keys are skipped. The unit price is re-derived from the
        package fields afterwards.
        """
        for key, value in patch.items():
            coerce = _FIELD_COERCERS.get(key)
            if coerce is None:
                logger.debug(f"Ignoring unknown layer field {key!r}")
                continue
            setattr(self, key, coerce(value))
        self.derive_unit_price()

    def derive_unit_price(self) -> None:
        """Overwrite unit_price from the package fields when they apply."""
        if (
            self.package_area is not None
            and self.package_area > 0
            and self.package_unit_price is not None
        ):
            self.unit_price = self.package_unit_price / self.package_area

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "unit_price": self.unit_price,
            "wall_count": self.wall_count,
            "applies_floor": self.applies_floor,
            "applies_ceiling": self.applies_ceiling,
            "package_unit_price": self.package_unit_price,
            "package_area": self.package_area,
            "exclusion_area": self.exclusion_area,
        }


@dataclass
class Room:
    """A rectangular room with an ordered list of material layers.

    Dimensions are in meters and are only written through set_dimension,
    which never fails. Layers keep insertion order; removing one leaves the
    rest in their original relative order.
    """

    length: float = 5.0
    width: float = 4.0
    height: float = 3.0
    layers: list[MaterialLayer] = field(default_factory=list)
    layer_defaults: LayerDefaults = field(default_factory=LayerDefaults)
    _ids: Iterator[int] = field(
        default_factory=lambda: itertools.count(1), init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self.length = coerce_non_negative(self.length)
        self.width = coerce_non_negative(self.width)
        self.height = coerce_non_negative(self.height)
        if self.layers:
            # Continue numbering after any layers passed in.
            next_id = max(layer.id for layer in self.layers) + 1
            self._ids = itertools.count(next_id)

    @property
    def max_dimension(self) -> float:
        return max(self.length, self.width, self.height)

    def set_dimension(self, which: Dimension | str, value: Any) -> None:
        """Set one dimension, using 0 for invalid or negative input."""
        try:
            dimension = Dimension(which)
        except ValueError:
            logger.debug(f"Ignoring unknown dimension {which!r}")
            return
        setattr(self, dimension.value, coerce_non_negative(value))

    def add_layer(self, initial: Mapping[str, Any] | None = None) -> MaterialLayer:
        """Append a new layer built from the defaults plus ``initial``."""
        defaults = self.layer_defaults
        layer_id = next(self._ids)
        layer = MaterialLayer(
            id=layer_id,
            name=f"{defaults.name_prefix} {layer_id}",
            unit_price=defaults.unit_price,
            wall_count=defaults.wall_count,
            applies_floor=defaults.applies_floor,
            applies_ceiling=defaults.applies_ceiling,
        )
        layer.apply(initial or {})
        self.layers.append(layer)
        logger.debug(f"Added layer {layer_id} ({layer.name!r})")
        return layer

    def get_layer(self, layer_id: int) -> MaterialLayer | None:
        for layer in self.layers:
            if layer.id == layer_id:
                return layer
        return None

    def update_layer(self, layer_id: int, patch: Mapping[str, Any]) -> MaterialLayer | None:
        """Apply ``patch`` to the layer with ``layer_id``.

        Returns:
            The updated layer, or None when no layer has that id.
        """
        layer = self.get_layer(layer_id)
        if layer is None:
            logger.debug(f"update_layer: no layer with id {layer_id}")
            return None
        layer.apply(patch)
        return layer

    def remove_layer(self, layer_id: int) -> bool:
        """Remove the layer with ``layer_id``; returns whether one was removed."""
        for index, layer in enumerate(self.layers):
            if layer.id == layer_id:
                del self.layers[index]
                logger.debug(f"Removed layer {layer_id}")
                return True
        logger.debug(f"remove_layer: no layer with id {layer_id}")
        return False
