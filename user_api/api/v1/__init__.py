from .user_controller import router as user_router
from .examples_controller import router as examples_router


__all__ = ["user_router", "examples_router"]
