"""Material types, their instances and per-frame draw batches."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Sequence

from quark.arena import align_forward
from quark.text import PanicError

MAX_MATERIAL_TYPES = 16
MATERIAL_ALIGNMENT = 16


class BatchOverflowError(PanicError):
    """Raised when more is pushed than a material batch or type list can hold."""


@dataclass
class MaterialInfo:
    """Sizing of one material type; material_size is rounded up to 16 bytes."""

    material_size: int
    batch_capacity: int
    material_instance_capacity: int
    world_size: int = 0

    def __post_init__(self) -> None:
        self.material_size = align_forward(self.material_size, MATERIAL_ALIGNMENT)


@dataclass
class MaterialBatch:
    """Stored material instances and the drawables queued for this frame."""

    material_instances: list[Any] = field(default_factory=list)
    drawables: list[Any] = field(default_factory=list)
    materials: list[Any] = field(default_factory=list)

    @property
    def batch_count(self) -> int:
        return len(self.drawables)


class MaterialRegistry:
    """Material types by id, each with its own batch."""

    def __init__(self) -> None:
        self.infos: list[MaterialInfo] = []
        self.batches: list[MaterialBatch] = []

    def add_material_type(self, info: MaterialInfo) -> int:
        """Register a material type and return its id."""
        if len(self.infos) >= MAX_MATERIAL_TYPES:
            raise BatchOverflowError(f"Cannot add more than {MAX_MATERIAL_TYPES} material types!\n")
        self.infos.append(info)
        self.batches.append(MaterialBatch())
        return len(self.infos) - 1

    def add_material_instance(self, material_id: int, instance: Any) -> int:
        """Store a copy of a material instance and return its index."""
        info = self.infos[material_id]
        batch = self.batches[material_id]
        if len(batch.material_instances) >= info.material_instance_capacity:
            raise BatchOverflowError("Attempted to add more material instances than a material could hold!\n")
        batch.material_instances.append(copy.copy(instance))
        return len(batch.material_instances) - 1

    def get_material_instance(self, material_id: int, index: int) -> Any:
        return self.batches[material_id].material_instances[index]

    def push_drawable_instance(self, material_id: int, drawable: Any, material: Any) -> int:
        """Queue a drawable with a copy of its material; returns its batch slot."""
        info = self.infos[material_id]
        batch = self.batches[material_id]
        if batch.batch_count >= info.batch_capacity:
            raise BatchOverflowError("Attempted to draw more than a material batch could handle!\n")
        batch.drawables.append(drawable)
        batch.materials.append(copy.copy(material))
        return batch.batch_count - 1

    def push_drawable_instances(
        self, material_id: int, drawables: Sequence[Any], materials: Sequence[Any]
    ) -> int:
        """Queue several drawables at once; returns the first batch slot used."""
        if len(drawables) != len(materials):
            raise ValueError("drawables and materials must have the same length")
        info = self.infos[material_id]
        batch = self.batches[material_id]
        start = batch.batch_count
        if start + len(drawables) > info.batch_capacity:
            raise BatchOverflowError("Attempted to draw more than a material batch could handle!\n")
        batch.drawables.extend(drawables)
        batch.materials.extend(copy.copy(m) for m in materials)
        return start

    def push_drawable(self, material_id: int, drawable: Any, instance_index: int) -> int:
        """Queue a drawable using a stored material instance."""
        material = self.get_material_instance(material_id, instance_index)
        return self.push_drawable_instance(material_id, drawable, material)

    def reset(self) -> None:
        """Empty every batch's queued drawables; stored instances stay."""
        for batch in self.batches:
            batch.drawables.clear()
            batch.materials.clear()