"""JSON Patch application for candidate documents."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

import jsonpatch
import jsonpointer


class PatchError(Exception):
    """The patch document cannot be applied to the target document."""


class PatchEngine(Protocol):
    """Apply an ordered list of operations to a document.

    Implementations must not mutate ``document`` and must fail as a whole:
    either every operation applies or ``PatchError`` is raised.
    """

    def apply(self, document: Mapping[str, Any], operations: Any) -> dict[str, Any]: ...


class JsonPatchEngine:
    """RFC 6902 patch engine backed by the ``jsonpatch`` library."""

    def apply(self, document: Mapping[str, Any], operations: Any) -> dict[str, Any]:
        if not isinstance(operations, list):
            raise PatchError("patch document must be a JSON array of operations")
        for index, operation in enumerate(operations):
            if not isinstance(operation, Mapping):
                raise PatchError(f"operation {index} is not a JSON object")

        try:
            patch = jsonpatch.JsonPatch(operations)
            patched = patch.apply(dict(document), in_place=False)
        except (jsonpatch.JsonPatchException, jsonpointer.JsonPointerException) as exc:
            raise PatchError(str(exc)) from exc

        if not isinstance(patched, dict):
            # e.g. a replace on the root path with a scalar value
            raise PatchError("patch must produce a JSON object")
        return patched
