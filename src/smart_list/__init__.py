"""Hierarchical smart lists for presentation slides."""

from smart_list.icon_sets import BuiltInIconRegistry
from smart_list.models.config import ListConfig, ListDocument
from smart_list.models.item import FlatListItem, IconRef, ListItem
from smart_list.protocols import DataChangeHandler, IconRegistryProtocol
from smart_list.session import ListSession

__all__ = [
    "BuiltInIconRegistry",
    "DataChangeHandler",
    "FlatListItem",
    "IconRef",
    "IconRegistryProtocol",
    "ListConfig",
    "ListDocument",
    "ListItem",
    "ListSession",
]
