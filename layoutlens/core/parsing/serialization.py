"""Conversion between registries and ordered [key, value] pair lists."""
from typing import Any, Dict, Iterable, List, Mapping, Sequence


def _plain(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    return to_dict() if callable(to_dict) else value


def registry_to_pairs(registry: Mapping[str, Any]) -> List[List[Any]]:
    """Keeps insertion order; record values are converted with ``to_dict``."""
    return [[key, _plain(value)] for key, value in registry.items()]


def pairs_to_registry(pairs: Iterable[Sequence[Any]]) -> Dict[Any, Any]:
    """
    Rebuilds a registry from pairs produced by ``registry_to_pairs``.

    Raises:
        ValueError: if a pair is malformed or a key repeats
    """
    registry: Dict[Any, Any] = {}
    for pair in pairs:
        if len(pair) != 2:
            raise ValueError(f"Expected a [key, value] pair, got {len(pair)} items")
        key, value = pair
        if key in registry:
            raise ValueError(f"Duplicate registry key: {key!r}")
        registry[key] = value
    return registry
