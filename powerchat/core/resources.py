"""Named game resources and the resolver capability that names them.

Achievements, statistics and items are identified by keys in the host game;
turning those into the names the client understands is the host's job, so it
is injected through :class:`ResourceResolver`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable

from powerchat.core.errors import IllegalParameterError, InvalidArgumentError


@runtime_checkable
class ResourceResolver(Protocol):
    def resolve_named_resource(self, kind: str, key: str) -> str: ...


class StatisticType(str, Enum):
    UNTYPED = "untyped"
    BLOCK = "block"
    ITEM = "item"
    ENTITY = "entity"


@dataclass(frozen=True)
class Achievement:
    key: str


@dataclass(frozen=True)
class Item:
    key: str


@dataclass(frozen=True)
class Material:
    key: str
    is_block: bool = False


@dataclass(frozen=True)
class EntityType:
    key: str


@dataclass(frozen=True)
class Statistic:
    key: str
    type: StatisticType = StatisticType.UNTYPED


Qualifier = Material | EntityType


def statistic_resource_key(statistic: Statistic, qualifier: Qualifier | None = None) -> str:
    """Validate the qualifier against the statistic type and build its lookup key."""
    if statistic.type is StatisticType.UNTYPED:
        if qualifier is not None:
            raise IllegalParameterError("That statistic requires no additional parameter!")
        return statistic.key

    if qualifier is None:
        raise IllegalParameterError(
            f"That statistic requires an additional {statistic.type.value} parameter!"
        )

    if statistic.type is StatisticType.ENTITY:
        valid = isinstance(qualifier, EntityType)
    elif statistic.type is StatisticType.BLOCK:
        valid = isinstance(qualifier, Material) and qualifier.is_block
    else:
        valid = isinstance(qualifier, Material)

    if not valid:
        raise IllegalParameterError(
            f"Wrong parameter type for that statistic - needs {statistic.type.value}!"
        )
    return f"{statistic.key}.{qualifier.key}"


def require_resolver(resolver: ResourceResolver | None, kind: str) -> ResourceResolver:
    if resolver is None:
        raise InvalidArgumentError(f"A resource resolver is needed to name this {kind}")
    return resolver
