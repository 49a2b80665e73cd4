from __future__ import annotations

from typing import Callable, Dict, List

from sources.base import DocumentSource


SourceFactory = Callable[..., DocumentSource]

_REGISTRY: Dict[str, SourceFactory] = {}


def register(name: str, factory: SourceFactory) -> None:
    _REGISTRY[name] = factory


def get_source(name: str, **kwargs) -> DocumentSource:
    """Build a registered document source; kwargs go to its constructor."""
    try:
        factory = _REGISTRY[name]
    except KeyError:
        known = ", ".join(sorted(_REGISTRY)) or "none"
        raise KeyError(f"Unknown source: {name} (available: {known})") from None
    return factory(**kwargs)


def available_sources() -> List[str]:
    return sorted(_REGISTRY)
