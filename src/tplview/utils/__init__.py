"""
tplview.utils – Small shared utilities (dynamic imports, KEY=VALUE parsing).
"""
from .imports import instantiate_from_ref, load_object_from_ref
from .items import parse_items

__all__ = ["instantiate_from_ref", "load_object_from_ref", "parse_items"]
