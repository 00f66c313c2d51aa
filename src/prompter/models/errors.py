"""
Domain errors raised while building prompt instances.

All errors are raised at construction time; a running reveal never raises
these.
"""

from typing import TYPE_CHECKING, Any, List, Optional, Tuple

if TYPE_CHECKING:
    from prompter.services.controller import PromptController
    from prompter.surfaces.surface import Surface


class PrompterError(Exception):
    """Base class for domain-specific errors"""
    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[dict] = None
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidContentError(PrompterError):
    """Content specification can't be resolved to text"""
    def __init__(self, message: str, content: Any = None):
        super().__init__(
            code="INVALID_CONTENT",
            message=message,
            details={"content": repr(content)}
        )


class ConfigurationError(PrompterError):
    """Option value out of range, wrong type or unknown option"""
    def __init__(self, option: str, message: str, value: Any = None):
        super().__init__(
            code="INVALID_CONFIGURATION",
            message=f"{option}: {message}",
            details={"option": option, "value": repr(value)}
        )
        self.option = option


class AttachError(PrompterError):
    """
    One or more surfaces of a batch failed to attach.

    Surfaces that did attach are registered and reachable through `controller`.
    """
    def __init__(
        self,
        failures: List[Tuple["Surface", PrompterError]],
        controller: Optional["PromptController"] = None
    ):
        super().__init__(
            code="ATTACH_FAILED",
            message=f"{len(failures)} surface(s) failed to attach",
            details={"surfaces": [getattr(s, "id", None) for s, _ in failures]}
        )
        self.failures = failures
        self.controller = controller
