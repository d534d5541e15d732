"""Pluggy markers for depcache hook specifications and implementations."""

import pluggy

HOOK_NAMESPACE = "depcache"

hook_spec = pluggy.HookspecMarker(HOOK_NAMESPACE)
hook_impl = pluggy.HookimplMarker(HOOK_NAMESPACE)
