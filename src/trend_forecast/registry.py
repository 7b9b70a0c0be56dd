from __future__ import annotations

from typing import Callable, Dict, Any, List

from .models.base import SupportsForecast
from .models.linear import LinearTrend

ModelFactory = Callable[..., SupportsForecast]

# name -> factory; the pipeline resolves PipelineConfig.model here
REGISTRY: Dict[str, ModelFactory] = {}

def register(name: str, factory: ModelFactory, overwrite: bool = False) -> None:
    """Register a model factory under a string name."""
    if not isinstance(name, str) or not name:
        raise ValueError("Model name must be a non-empty string.")
    if name in REGISTRY and not overwrite:
        raise ValueError(f"Model '{name}' is already registered; pass overwrite=True to replace it.")
    REGISTRY[name] = factory

def available_models() -> List[str]:
    return sorted(REGISTRY)

def get_model(name: str, **kwargs) -> SupportsForecast:
    """Instantiate a model by name, passing kwargs to its factory."""
    try:
        factory = REGISTRY[name]
    except KeyError as e:
        raise KeyError(f"Unknown model '{name}'. "
                       f"Available: {', '.join(available_models())}") from e
    return factory(**kwargs)

# ---- Default registrations --------------------------------------------------

register("linear_trend", lambda **_: LinearTrend())
