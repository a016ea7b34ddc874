from .topics import router as topics_router

__all__ = [
    "topics_router",
]
