from __future__ import annotations

from typing import Any, Callable, Dict, Type, TypeVar

from .base_agent import BaseAgent

AGENT_REGISTRY: Dict[str, Type[BaseAgent]] = {}
AgentType = TypeVar("AgentType", bound=Type[BaseAgent])


def register_agent(key: str, cls: AgentType | None = None) -> AgentType | Callable[[AgentType], AgentType]:
    """
    Make an agent class available to create_agent under `key`.

    Works both as `@register_agent("foo")` on the class and as
    `register_agent("foo", FooAgent)` afterwards.
    """
    def decorator(target_cls: AgentType) -> AgentType:
        AGENT_REGISTRY[key] = target_cls
        return target_cls

    if cls is None:
        return decorator

    return decorator(cls)


def resolve_agent_class(key: str) -> Type[BaseAgent]:
    """Look up a registered agent class, e.g. "random"."""
    try:
        return AGENT_REGISTRY[key]
    except KeyError:
        known = ", ".join(sorted(AGENT_REGISTRY)) or "none"
        raise ValueError(f"Unknown agent type '{key}' (registered: {known})") from None


def create_agent(key: str, **init_params: Any) -> BaseAgent:
    """Instantiate a registered agent with the given constructor arguments."""
    return resolve_agent_class(key)(**init_params)
