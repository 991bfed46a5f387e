from .demo_storage import DemoStorageEntry


__all__ = [
    "DemoStorageEntry",
]
