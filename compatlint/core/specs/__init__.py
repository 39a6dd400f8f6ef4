from .models import NightlySpec, SeriesSpec, SpecDescriptor
from .index import SpecUrlIndex, build_spec_url_index
from .loader import load_spec_catalog

__all__ = [
    "NightlySpec",
    "SeriesSpec",
    "SpecDescriptor",
    "SpecUrlIndex",
    "build_spec_url_index",
    "load_spec_catalog",
]
