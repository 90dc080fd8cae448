"""Environment model — scoped bindings, parent chain, TDZ tracking.

Environment records live in an arena owned by the simulator state and refer
to their outer record by integer id, so a snapshot of the arena is a plain
acyclic structure that can be deep-copied into the trace.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .values import UNDEFINED, serialize_value


@dataclass
class Binding:
    initialized: bool = False
    value: Any = UNDEFINED

    def initialize(self, value: Any) -> None:
        self.initialized = True
        self.value = value

    def to_dict(self) -> dict:
        d: dict[str, Any] = {"initialized": self.initialized}
        if self.initialized:
            d["value"] = serialize_value(self.value)
        return d


@dataclass
class EnvironmentRecord:
    env_id: int
    parent_id: int | None = None
    owner: str = ""
    bindings: dict[str, Binding] = field(default_factory=dict)

    def has_own(self, name: str) -> bool:
        return name in self.bindings

    def declare_hoisted(self, name: str) -> Binding:
        """``var`` hoisting: the binding starts initialized with undefined."""
        binding = Binding(initialized=True, value=UNDEFINED)
        self.bindings[name] = binding
        return binding

    def declare_uninitialized(self, name: str) -> Binding:
        """``let``/``const`` hoisting: the binding starts in the TDZ."""
        binding = Binding(initialized=False)
        self.bindings[name] = binding
        return binding

    def bind(self, name: str, value: Any) -> Binding:
        """Initialize or overwrite *name* in this record only."""
        binding = self.bindings.get(name)
        if binding is None:
            binding = Binding()
            self.bindings[name] = binding
        binding.initialize(value)
        return binding

    def to_dict(self) -> dict:
        return {
            "env_id": self.env_id,
            "parent_id": self.parent_id,
            "owner": self.owner,
            "bindings": {k: b.to_dict() for k, b in self.bindings.items()},
        }


@dataclass
class LookupResult:
    """Result of resolving a name along the parent chain."""

    found: bool
    binding: Binding | None = None
    env_id: int | None = None

    @classmethod
    def missing(cls) -> LookupResult:
        return cls(found=False)


def resolve(
    environments: list[EnvironmentRecord], start_id: int, name: str
) -> LookupResult:
    """Walk from *start_id* outward until *name* is found or the chain ends."""
    env_id: int | None = start_id
    while env_id is not None:
        env = environments[env_id]
        if env.has_own(name):
            return LookupResult(found=True, binding=env.bindings[name], env_id=env_id)
        env_id = env.parent_id
    return LookupResult.missing()
