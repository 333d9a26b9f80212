"""
Level serializer.

Writes a ``LevelDefinition`` as text the parser reads back to an equal
level. Layout is fixed: two-space indentation, top-level scalars in schema
order, then each collection with one entity per line. Cutscene frames are
nested one level deeper.

Serializing the same level twice gives byte-identical output.
"""

import math
from decimal import Decimal
from typing import Any, List

from ..document.scanner import escape
from ..errors import LevelSerializeError
from .models import CutsceneData, LevelDefinition
from .schema import FRAME_FIELDS, FRAMES_KEY, LEVEL_FIELDS, SECTIONS, FieldKind, FieldSpec

INDENT = "  "


def format_float(value: float) -> str:
    """Format a float in positional notation.

    ``repr`` gives the shortest text that reads back to the same float, but
    switches to exponent form for very large or small magnitudes, which the
    parser does not accept. Those are expanded through ``Decimal``.

    Raises:
        LevelSerializeError: If the value is NaN or infinite
    """
    value = float(value)
    if not math.isfinite(value):
        raise LevelSerializeError(f"Cannot write non-finite number {value!r}")

    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
        if "." not in text:
            text += ".0"
    return text


def format_string(value: str) -> str:
    return f'"{escape(value)}"'


def format_value(spec: FieldSpec, value: Any) -> str:
    """Format one field value according to its kind."""
    if spec.kind is FieldKind.INT:
        return str(int(value))
    if spec.kind is FieldKind.FLOAT:
        return format_float(value)
    if spec.kind is FieldKind.BOOL:
        return "true" if value else "false"
    if spec.kind is FieldKind.STR:
        return format_string(value)
    return "[" + ", ".join(format_string(item) for item in value) + "]"


class LevelSerializer:
    """Turns levels into text."""

    def to_text(self, level: LevelDefinition) -> str:
        """Serialize a level.

        Args:
            level: Level to write

        Returns:
            Document text ending with a newline

        Raises:
            LevelSerializeError: If a float field is NaN or infinite
        """
        lines: List[str] = ["{"]

        for spec in LEVEL_FIELDS:
            if spec.emit_if is not None and not spec.emit_if(level):
                continue
            lines.append(f'{INDENT}"{spec.key}": {format_value(spec, getattr(level, spec.attr))},')

        for index, section in enumerate(SECTIONS):
            entities = getattr(level, section.attr)
            closing = "]" if index == len(SECTIONS) - 1 else "],"

            lines.append(f'{INDENT}"{section.key}": [')
            for position, entity in enumerate(entities):
                separator = "," if position < len(entities) - 1 else ""
                lines.append(f"{INDENT * 2}{self._entity_text(entity, section.fields)}{separator}")
            lines.append(f"{INDENT}{closing}")

        lines.append("}")
        return "\n".join(lines) + "\n"

    def _entity_text(self, entity: Any, fields: tuple[FieldSpec, ...]) -> str:
        members = self._members(entity, fields)

        if isinstance(entity, CutsceneData):
            frame_lines = [
                f"{INDENT * 3}{{ {', '.join(self._members(frame, FRAME_FIELDS))} }}"
                for frame in entity.frames
            ]
            frames = ",\n".join(frame_lines)
            if frames:
                frames += "\n"
            members.append(f'"{FRAMES_KEY}": [\n{frames}{INDENT * 2}]')

        return "{ " + ", ".join(members) + " }"

    @staticmethod
    def _members(entity: Any, fields: tuple[FieldSpec, ...]) -> List[str]:
        return [
            f'"{spec.key}": {format_value(spec, getattr(entity, spec.attr))}'
            for spec in fields
            if spec.emit_if is None or spec.emit_if(entity)
        ]
