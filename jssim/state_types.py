"""Simulator state — data types plus the frame push/pop pairing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .ast_nodes import FunctionDeclaration
from .environment import EnvironmentRecord, LookupResult, resolve
from . import constants


@dataclass
class SimulatorState:
    call_stack: list[str] = field(default_factory=list)
    heap: dict[str, FunctionDeclaration] = field(default_factory=dict)
    environments: list[EnvironmentRecord] = field(default_factory=list)
    env_stack: list[int] = field(default_factory=list)
    # Reserved event-loop surface; never populated.
    macro_task_queue: list[str] = field(default_factory=list)
    micro_task_queue: list[str] = field(default_factory=list)
    object_counter: int = 0

    def fresh_object_addr(self) -> str:
        addr = constants.OBJ_ADDR_TEMPLATE.format(index=self.object_counter)
        self.object_counter += 1
        return addr

    @property
    def current_env(self) -> EnvironmentRecord:
        return self.environments[self.env_stack[-1]]

    @property
    def depth(self) -> int:
        return len(self.call_stack)

    def push_frame(self, name: str) -> EnvironmentRecord:
        """Push *name* and a new environment whose parent is the current one."""
        parent_id = self.env_stack[-1] if self.env_stack else None
        env = EnvironmentRecord(
            env_id=len(self.environments), parent_id=parent_id, owner=name
        )
        self.environments.append(env)
        self.call_stack.append(name)
        self.env_stack.append(env.env_id)
        return env

    def pop_frame(self) -> str:
        self.env_stack.pop()
        return self.call_stack.pop()

    def lookup(self, name: str) -> LookupResult:
        return resolve(self.environments, self.env_stack[-1], name)

    def to_dict(self) -> dict[str, Any]:
        return {
            "call_stack": list(self.call_stack),
            "heap": sorted(self.heap),
            "env_stack": list(self.env_stack),
            "environments": [env.to_dict() for env in self.environments],
            "macro_task_queue": list(self.macro_task_queue),
            "micro_task_queue": list(self.micro_task_queue),
        }
