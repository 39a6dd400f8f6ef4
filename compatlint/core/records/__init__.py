from .models import FeatureRecord, StatusBlock, SupportEntry

__all__ = [
    "FeatureRecord",
    "StatusBlock",
    "SupportEntry",
]
