"""Utility functions to build the plugin manager used by a cache coordinator."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from inspect import isclass
from typing import Any

from pluggy import PluginManager

from .markers import HOOK_NAMESPACE
from .specs import CacheSpec

logger = logging.getLogger(__name__)

_PLUGIN_ENTRY_POINT = "depcache.hooks"  # entry-point to load hooks from for installed plugins


def create_hook_manager(
    plugins: Iterable[Any] = (), load_entry_points: bool = False
) -> PluginManager:
    """
    Create a plugin manager with the depcache hook specs and the given plugins.

    Args:
        plugins: Hook implementations to register, as instances.
        load_entry_points: Also register plugins advertised under the ``depcache.hooks``
            entry point by installed packages.

    Raises:
        TypeError: If a plugin is passed as a class rather than an instance.
    """
    manager = PluginManager(HOOK_NAMESPACE)
    manager.add_hookspecs(CacheSpec)

    for plugin in plugins:
        if isclass(plugin):
            raise TypeError(
                "depcache expects hooks to be registered as instances. "
                "Have you forgotten the `()` when registering a hook class?"
            )
        if not manager.is_registered(plugin):
            manager.register(plugin)

    if load_entry_points:
        count = manager.load_setuptools_entrypoints(_PLUGIN_ENTRY_POINT)  # Doesn't use setuptools
        logger.debug(f"Loaded {count} plugin(s) from entry point '{_PLUGIN_ENTRY_POINT}'")

    return manager
