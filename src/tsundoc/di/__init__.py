from .bootstrap import bootstrap
from .container import CircularDependencyError, Container, Lifetime, Registration, ResolutionError

__all__ = [
    "CircularDependencyError",
    "Container",
    "Lifetime",
    "Registration",
    "ResolutionError",
    "bootstrap",
]
