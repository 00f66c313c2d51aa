"""
Services: registry, visibility dispatch, event routing and the control surface
"""

from .event_bus import EventBus
from .registry import Registry
from .dispatcher import VisibilityDispatcher, intersects_viewport
from .service_container import ServiceContainer, create_services
from .controller import PromptController, attach

__all__ = [
    'EventBus',
    'Registry',
    'VisibilityDispatcher',
    'intersects_viewport',
    'ServiceContainer',
    'create_services',
    'PromptController',
    'attach',
]
