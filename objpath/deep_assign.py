"""Deep merge of dicts and lists with a configurable list strategy."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from .object_utils.copying import copy
from .object_utils.nodes import NodeKind, is_container, kind_of


class ArrayMode(StrEnum):
    """How two lists found at the same place are combined."""

    MERGE = "merge"
    SHALLOW_MERGE = "shallow_merge"
    CONCAT = "concat"
    OVERWRITE = "overwrite"


class DeepAssign:
    """Deep merge (and copy) any number of dicts and/or lists."""

    def __init__(self, array_mode: ArrayMode | str = ArrayMode.MERGE) -> None:
        super().__init__()
        try:
            self._array_mode = ArrayMode(array_mode)
        except ValueError as error:
            msg = f"Invalid array mode received: {array_mode!r}"
            raise ValueError(msg) from error

    @property
    def array_mode(self) -> ArrayMode:
        """Strategy used for lists found on both sides of a merge."""
        return self._array_mode

    def assign(self, *targets: Any) -> Any:
        """Merge ``targets`` from left to right into a new structure.

        Arguments that are neither dicts nor lists are ignored. Top level lists
        are always merged by index: ``concat`` and ``overwrite`` only apply to
        nested lists.
        """
        valid = [target for target in targets if is_container(target)]
        if not valid:
            return {}

        result = copy(valid[0])
        for target in valid[1:]:
            result = self._resolve(result, target, top_level=True)
        return result

    def _resolve(self, source: Any, target: Any, top_level: bool = False) -> Any:
        source_kind = kind_of(source)
        target_kind = kind_of(target)
        if source_kind is NodeKind.SEQUENCE and target_kind is NodeKind.SEQUENCE:
            mode = self._array_mode
            if top_level and mode not in {ArrayMode.MERGE, ArrayMode.SHALLOW_MERGE}:
                mode = ArrayMode.MERGE
            return self._merge_sequences(source, target, mode)
        if source_kind is NodeKind.MAPPING and target_kind is NodeKind.MAPPING:
            return self._merge_mappings(source, target)
        return copy(target)

    def _merge_sequences(self, source: Any, target: Any, mode: ArrayMode) -> list[Any]:
        match mode:
            case ArrayMode.CONCAT:
                return [copy(item) for item in [*source, *target]]
            case ArrayMode.OVERWRITE:
                return [copy(item) for item in target]
            case ArrayMode.SHALLOW_MERGE:
                result = [copy(item) for item in source]
                for index, item in enumerate(target):
                    if index < len(result):
                        result[index] = copy(item)
                    else:
                        result.append(copy(item))
                return result
            case ArrayMode.MERGE:
                result = [copy(item) for item in source]
                for index, item in enumerate(target):
                    if index < len(result):
                        result[index] = self._resolve(source[index], item)
                    else:
                        result.append(copy(item))
                return result

    def _merge_mappings(self, source: Any, target: Any) -> dict[Any, Any]:
        result = {key: copy(value) for key, value in source.items()}
        for key, value in target.items():
            result[key] = self._resolve(source[key], value) if key in source else copy(value)
        return result


deep_assign = DeepAssign().assign
deep_assign_with_concat = DeepAssign(ArrayMode.CONCAT).assign
deep_assign_with_overwrite = DeepAssign(ArrayMode.OVERWRITE).assign
deep_assign_with_shallow_merge = DeepAssign(ArrayMode.SHALLOW_MERGE).assign
