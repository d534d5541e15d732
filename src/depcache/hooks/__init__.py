"""Pluggy hooks fired around cache restore and save."""

from .manager import create_hook_manager
from .markers import hook_impl
from .markers import hook_spec

__all__ = ["create_hook_manager", "hook_impl", "hook_spec"]
