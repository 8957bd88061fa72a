from .contact_routes import contact_bp
from .core_routes import core

__all__ = ["contact_bp", "core"]
