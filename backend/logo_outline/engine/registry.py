"""Stage registry — every pipeline stage is a standalone function registered via decorator.

Usage:
    @stage(id="S1.01", phase=Phase.STRUCTURE, dependencies=["S0.02"])
    def nesting_order(ctx: OutlineContext) -> None:
        ctx.subpaths = order_by_nesting(ctx.subpaths)

Adding a new stage = creating one file in ``engine/stages`` with the decorator.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from logo_outline.engine.context import OutlineContext

logger = logging.getLogger(__name__)


class Phase(enum.IntEnum):
    PARSING = 0
    STRUCTURE = 1
    RASTER = 2
    OUTPUT = 3


@dataclass
class StageSpec:
    id: str
    phase: Phase
    fn: Callable[["OutlineContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class StageRegistry:
    """Registry of pipeline stages."""

    def __init__(self) -> None:
        self._stages: dict[str, StageSpec] = {}

    def register(self, spec: StageSpec) -> None:
        if spec.id in self._stages:
            raise ValueError(f"Duplicate stage ID: {spec.id}")
        self._stages[spec.id] = spec
        logger.debug("Registered stage %s (%s)", spec.id, spec.phase.name)

    def resolve_order(self) -> list[StageSpec]:
        """Topological sort respecting dependencies (Kahn's algorithm)."""
        pool = self._stages
        in_degree: dict[str, int] = {sid: 0 for sid in pool}
        for sid, spec in pool.items():
            for dep in spec.dependencies:
                if dep not in pool:
                    raise ValueError(f"Stage {sid} depends on unknown stage {dep}")
                in_degree[sid] += 1

        queue = sorted(sid for sid, d in in_degree.items() if d == 0)
        ordered: list[StageSpec] = []

        while queue:
            sid = queue.pop(0)
            ordered.append(pool[sid])
            for other_id, other_spec in pool.items():
                if sid in other_spec.dependencies:
                    in_degree[other_id] -= 1
                    if in_degree[other_id] == 0:
                        queue.append(other_id)
                        queue.sort()

        if len(ordered) != len(pool):
            missing = set(pool) - {s.id for s in ordered}
            raise ValueError(f"Circular dependency detected among: {missing}")

        return ordered

    @property
    def count(self) -> int:
        return len(self._stages)


# Module-level singleton
_registry = StageRegistry()


def get_registry() -> StageRegistry:
    return _registry


def stage(
    *,
    id: str,
    phase: Phase,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator to register a stage function."""

    def decorator(fn: Callable[["OutlineContext"], None]):
        spec = StageSpec(
            id=id,
            phase=phase,
            fn=fn,
            dependencies=dependencies or [],
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator
