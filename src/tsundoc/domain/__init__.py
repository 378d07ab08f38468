from .models import FetchStatus, Item, ViewMode

__all__ = ["FetchStatus", "Item", "ViewMode"]
