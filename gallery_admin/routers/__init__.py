# gallery_admin/routers/__init__.py

# Import all router modules to make them available
from . import rsvp
from . import statistics

__all__ = [
    "rsvp",
    "statistics",
]
