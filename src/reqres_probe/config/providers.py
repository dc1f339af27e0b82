"""
Friendly names for client providers, used when reporting which client a run uses.
"""
from typing import Callable, Dict, Type

# Registry for provider friendly names
_provider_friendly_names: Dict[Type, str] = {}


def simple_provider_name(friendly_name: str) -> Callable:
    """
    Decorator to assign a friendly name to a provider class.

    Usage:
        @simple_provider_name("In Memory")
        class InMemoryAPITestClient:
            pass
    """
    def decorator(cls: Type) -> Type:
        _provider_friendly_names[cls] = friendly_name
        return cls
    return decorator


def get_provider_friendly_name(provider_class: Type) -> str:
    """
    Get the friendly name for a provider class.

    Args:
        provider_class: The provider class to get the friendly name for

    Returns:
        The friendly name if decorated, otherwise the class name
    """
    return _provider_friendly_names.get(provider_class, provider_class.__name__)
