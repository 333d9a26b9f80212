"""
Projection of a parsed document onto the typed level model.

Every entity starts from its dataclass defaults. Preset selectors
(``depthLevel`` on parallax layers, ``lightType`` on light sources) are
applied first, then every recognized key present in the document overwrites
the corresponding attribute. Keys the schema does not know are ignored.
"""

import logging
import math
import re
from typing import Any, Iterator, List, Optional

from ..document.models import (
    COMMENT_KEY,
    ArrayValue,
    BoolValue,
    NumberValue,
    ObjectValue,
    StringValue,
    Value,
)
from ..errors import LevelBindError
from .models import (
    CutsceneData,
    CutsceneFrameData,
    LevelDefinition,
    LightSourceData,
    ParallaxLayerData,
)
from .presets import DEFAULT_PRESETS, PresetTables
from .schema import (
    FRAME_FIELDS,
    FRAMES_KEY,
    LEVEL_FIELDS,
    SECTIONS,
    FieldKind,
    FieldSpec,
    SectionSpec,
)

# Numeric strings accepted by the coercion helpers, e.g. "12", "-3.5", " 7 "
_NUMERIC_STRING = re.compile(r"\s*-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)\s*")


# =============================================================================
# Coercion helpers
# =============================================================================

def _string_number(value: str) -> Optional[float]:
    if _NUMERIC_STRING.fullmatch(value):
        return float(value)
    return None


def to_int(value: Optional[Value]) -> int:
    """Coerce a value to int, truncating toward zero.

    Numbers and numeric-looking strings convert; anything else gives 0.
    Every document number is a float, so magnitudes above 2**53 come back
    rounded to the nearest representable float.
    """
    if isinstance(value, NumberValue):
        number: Optional[float] = value.value
    elif isinstance(value, StringValue):
        number = _string_number(value.value)
    else:
        number = None

    if number is None or not math.isfinite(number):
        return 0
    return int(number)


def to_double(value: Optional[Value]) -> float:
    """Coerce a value to float. Non-numeric values give 0.0."""
    if isinstance(value, NumberValue):
        return value.value
    if isinstance(value, StringValue):
        number = _string_number(value.value)
        return 0.0 if number is None else number
    return 0.0


def to_bool(value: Optional[Value]) -> bool:
    """Coerce a value to bool.

    Only a Bool or the exact strings "true"/"false" are understood; everything
    else is False.
    """
    if isinstance(value, BoolValue):
        return value.value
    if isinstance(value, StringValue):
        return value.value == "true"
    return False


def to_str(value: Optional[Value], default: str = "") -> str:
    """Return the string payload, or ``default`` for any other kind of value."""
    if isinstance(value, StringValue):
        return value.value
    return default


def to_str_list(value: Optional[Value]) -> List[str]:
    """Coerce an array of strings; a lone string becomes a one-item list."""
    if isinstance(value, ArrayValue):
        return [to_str(item) for item in value]
    if isinstance(value, StringValue):
        return [value.value]
    return []


# =============================================================================
# Binder
# =============================================================================

class LevelBinder:
    """Builds a ``LevelDefinition`` from a parsed document.

    The binder is stateless apart from its preset tables, so one instance can
    bind any number of documents.
    """

    def __init__(self, presets: PresetTables = DEFAULT_PRESETS):
        """Initialize binder.

        Args:
            presets: Preset tables consulted for depth levels and light types
        """
        self.presets = presets
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def bind(self, document: Value) -> LevelDefinition:
        """Project a parsed document onto a fresh level.

        Args:
            document: Root value returned by the parser

        Returns:
            New LevelDefinition

        Raises:
            LevelBindError: If the root is not an object
        """
        if not isinstance(document, ObjectValue):
            raise LevelBindError(
                f"Level document root must be an object, got {type(document).__name__}"
            )

        level = LevelDefinition()
        self._apply_fields(level, document, LEVEL_FIELDS)

        for section in SECTIONS:
            raw = document.get(section.key)
            if raw is None:
                continue
            entities = getattr(level, section.attr)
            for entry in self._section_entries(section.key, raw):
                entities.append(self._bind_entity(section, entry))

        return level

    def _section_entries(self, section_key: str, raw: Value) -> Iterator[ObjectValue]:
        """Yield the object entries of a section that should become entities."""
        if not isinstance(raw, ArrayValue):
            self.logger.warning(f"Section '{section_key}' is not an array, ignoring it")
            return

        for index, item in enumerate(raw):
            if not isinstance(item, ObjectValue):
                self.logger.warning(
                    f"Skipping non-object entry {index} in section '{section_key}'"
                )
                continue
            if COMMENT_KEY in item:
                self.logger.debug(f"Skipping comment entry {index} in section '{section_key}'")
                continue
            yield item

    def _bind_entity(self, section: SectionSpec, entry: ObjectValue) -> Any:
        entity = section.entity()

        if isinstance(entity, ParallaxLayerData):
            self._apply_depth_preset(entity, entry)
        elif isinstance(entity, LightSourceData):
            self._apply_light_preset(entity, entry)

        self._apply_fields(entity, entry, section.fields)

        if isinstance(entity, LightSourceData):
            if "radius" in entry and "falloffRadius" not in entry:
                entity.falloff_radius = entity.radius * self.presets.falloff_multiplier
        elif isinstance(entity, CutsceneData):
            entity.frames = self._bind_frames(entity.id, entry.get(FRAMES_KEY))

        return entity

    def _bind_frames(self, cutscene_id: str, raw: Optional[Value]) -> List[CutsceneFrameData]:
        frames: List[CutsceneFrameData] = []
        if raw is None:
            return frames
        if not isinstance(raw, ArrayValue):
            self.logger.warning(f"Frames of cutscene '{cutscene_id}' are not an array, ignoring them")
            return frames

        for index, item in enumerate(raw):
            if not isinstance(item, ObjectValue):
                self.logger.warning(f"Skipping non-object frame {index} of cutscene '{cutscene_id}'")
                continue
            frame = CutsceneFrameData()
            self._apply_fields(frame, item, FRAME_FIELDS)
            frames.append(frame)
        return frames

    def _apply_depth_preset(self, layer: ParallaxLayerData, entry: ObjectValue) -> None:
        selector = to_str(entry.get("depthLevel"))
        if not selector:
            return
        preset = self.presets.depth_preset(selector)
        if preset is None:
            self.logger.debug(f"Unknown depth level '{selector}', no preset applied")
            return
        preset.apply_to(layer)

    def _apply_light_preset(self, light: LightSourceData, entry: ObjectValue) -> None:
        selector = to_str(entry.get("lightType"))
        if not selector:
            return
        preset = self.presets.light_preset(selector)
        if preset is None:
            self.logger.debug(f"Unknown light type '{selector}', no preset applied")
            return
        preset.apply_to(light)

    def _apply_fields(self, target: Any, obj: ObjectValue, fields: tuple[FieldSpec, ...]) -> None:
        """Overwrite attributes for every recognized key present in ``obj``."""
        for spec in fields:
            raw = obj.get(spec.key)
            if raw is None:
                continue

            if spec.kind is FieldKind.INT:
                value: Any = to_int(raw)
            elif spec.kind is FieldKind.FLOAT:
                value = to_double(raw)
            elif spec.kind is FieldKind.BOOL:
                value = to_bool(raw)
            elif spec.kind is FieldKind.STR:
                value = to_str(raw, getattr(target, spec.attr))
            else:
                value = to_str_list(raw)

            setattr(target, spec.attr, value)
