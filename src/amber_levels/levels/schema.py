"""
Wire schema for level files.

Maps document keys to model attributes and value kinds. The binder uses it
to know which keys are recognized, the serializer uses it for output order.
Order in these tuples is the order fields are written, so changing it
changes the file layout.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from .models import (
    BlockData,
    ButtonData,
    CutsceneData,
    DoorData,
    ItemData,
    LightSourceData,
    MobData,
    MovingBlockData,
    ParallaxLayerData,
    PlatformData,
    TriggerData,
    VaultData,
)


class FieldKind(Enum):
    """How a field is coerced on load and formatted on save."""
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    STR = "str"
    STR_LIST = "str_list"


@dataclass(frozen=True)
class FieldSpec:
    """One recognized key of an object.

    Attributes:
        key: Key as written in the file
        attr: Attribute name on the model
        kind: Value kind
        emit_if: Presence predicate on the owning object; the field is only
            written when it returns True. None means always written.
    """
    key: str
    attr: str
    kind: FieldKind
    emit_if: Optional[Callable[[Any], bool]] = None


@dataclass(frozen=True)
class SectionSpec:
    """An array section of the level and the entity it holds."""
    key: str
    attr: str
    entity: type
    fields: tuple[FieldSpec, ...]


def _int(key: str, attr: str, emit_if: Optional[Callable[[Any], bool]] = None) -> FieldSpec:
    return FieldSpec(key, attr, FieldKind.INT, emit_if)


def _float(key: str, attr: str, emit_if: Optional[Callable[[Any], bool]] = None) -> FieldSpec:
    return FieldSpec(key, attr, FieldKind.FLOAT, emit_if)


def _bool(key: str, attr: str) -> FieldSpec:
    return FieldSpec(key, attr, FieldKind.BOOL)


def _str(key: str, attr: str, emit_if: Optional[Callable[[Any], bool]] = None) -> FieldSpec:
    return FieldSpec(key, attr, FieldKind.STR, emit_if)


_POSITION = (_int("x", "x"), _int("y", "y"))

_COLOR_MASK = tuple(
    _int(key, attr, PlatformData.has_color_mask)
    for key, attr in (("maskRed", "mask_red"), ("maskGreen", "mask_green"), ("maskBlue", "mask_blue"))
)


def _tint(has_tint: Callable[[Any], bool]) -> tuple[FieldSpec, ...]:
    return tuple(
        _int(key, attr, has_tint)
        for key, attr in (("tintRed", "tint_red"), ("tintGreen", "tint_green"), ("tintBlue", "tint_blue"))
    )


# =============================================================================
# Top-level scalars
# =============================================================================

LEVEL_FIELDS: tuple[FieldSpec, ...] = (
    _str("name", "name"),
    _str("description", "description"),
    _str("backgroundPath", "background_path"),
    _str("musicPath", "music_path"),
    _int("playerSpawnX", "player_spawn_x"),
    _int("playerSpawnY", "player_spawn_y"),
    _str("playerSpritePath", "player_sprite_path"),
    _bool("useBoneAnimation", "use_bone_animation"),
    _str("boneTextureDir", "bone_texture_dir"),
    _bool("useSpriteAnimation", "use_sprite_animation"),
    _str("spriteAnimationDir", "sprite_animation_dir"),
    _int("levelWidth", "level_width"),
    _int("levelHeight", "level_height"),
    _int("groundY", "ground_y"),
    _bool("scrollingEnabled", "scrolling_enabled"),
    _bool("tileBackgroundHorizontal", "tile_background_horizontal"),
    _bool("tileBackgroundVertical", "tile_background_vertical"),
    _bool("verticalScrollEnabled", "vertical_scroll_enabled"),
    _int("verticalMargin", "vertical_margin"),
    _str("nextLevel", "next_level", lambda level: bool(level.next_level)),
    _bool("nightMode", "night_mode"),
    _float("nightDarkness", "night_darkness"),
    _float("ambientLight", "ambient_light"),
    _bool("playerLightEnabled", "player_light_enabled"),
    _float("playerLightRadius", "player_light_radius"),
    _float("playerLightFalloff", "player_light_falloff"),
    _bool("parallaxEnabled", "parallax_enabled"),
)


# =============================================================================
# Entity fields
# =============================================================================

PARALLAX_LAYER_FIELDS: tuple[FieldSpec, ...] = (
    _str("name", "name"),
    _str("imagePath", "image_path"),
    _str("depthLevel", "depth_level", lambda layer: bool(layer.depth_level)),
    _float("scrollSpeedX", "scroll_speed_x"),
    _float("scrollSpeedY", "scroll_speed_y"),
    _int("zOrder", "z_order"),
    _float("scale", "scale"),
    _float("opacity", "opacity"),
    _bool("tileHorizontal", "tile_horizontal"),
    _bool("tileVertical", "tile_vertical"),
    _int("offsetX", "offset_x"),
    _int("offsetY", "offset_y"),
    _bool("anchorBottom", "anchor_bottom"),
)

LIGHT_SOURCE_FIELDS: tuple[FieldSpec, ...] = _POSITION + (
    _str("lightType", "light_type"),
    _float("radius", "radius"),
    _float("falloffRadius", "falloff_radius"),
    _int("colorRed", "color_red"),
    _int("colorGreen", "color_green"),
    _int("colorBlue", "color_blue"),
    _float("intensity", "intensity"),
    _bool("flicker", "flicker"),
    _float("flickerAmount", "flicker_amount"),
    _float("flickerSpeed", "flicker_speed"),
)

PLATFORM_FIELDS: tuple[FieldSpec, ...] = _POSITION + (
    _str("spritePath", "sprite_path"),
    _bool("solid", "solid"),
) + _COLOR_MASK

ITEM_FIELDS: tuple[FieldSpec, ...] = _POSITION + (
    _str("spritePath", "sprite_path"),
    _str("itemName", "item_name"),
    _str("itemType", "item_type"),
    _str("itemId", "item_id", lambda item: bool(item.item_id)),
)

TRIGGER_FIELDS: tuple[FieldSpec, ...] = _POSITION + (
    _int("width", "width"),
    _int("height", "height"),
    _str("type", "type"),
    _str("target", "target"),
)

BLOCK_FIELDS: tuple[FieldSpec, ...] = _POSITION + (
    _str("blockType", "block_type"),
    _bool("useGridCoords", "use_grid_coords"),
    _str("overlay", "overlay", lambda block: bool(block.overlay)),
) + _tint(BlockData.has_tint)

MOVING_BLOCK_FIELDS: tuple[FieldSpec, ...] = _POSITION + (
    _str("blockType", "block_type"),
    _bool("useGridCoords", "use_grid_coords"),
    _str("movementPattern", "movement_pattern"),
    _int("endX", "end_x"),
    _int("endY", "end_y"),
    _float("speed", "speed"),
    _int("pauseTime", "pause_time"),
    _float("radius", "radius", MovingBlockData.has_radius),
    _str("waypoints", "waypoints", MovingBlockData.has_waypoints),
) + _tint(MovingBlockData.has_tint)

MOB_FIELDS: tuple[FieldSpec, ...] = _POSITION + (
    _str("mobType", "mob_type"),
    _str("subType", "sub_type"),
    _str("behavior", "behavior"),
    _str("textureDir", "texture_dir"),
    _str("spriteDir", "sprite_dir"),
    _float("wanderMinX", "wander_min_x"),
    _float("wanderMaxX", "wander_max_x"),
    _bool("debugDraw", "debug_draw"),
)

DOOR_FIELDS: tuple[FieldSpec, ...] = _POSITION + (
    _int("width", "width"),
    _int("height", "height"),
    _str("texturePath", "texture_path"),
    _str("linkId", "link_id"),
    _bool("startsOpen", "starts_open"),
    _bool("locked", "locked"),
    _str("keyItemId", "key_item_id"),
    _str("actionType", "action_type"),
    _str("actionTarget", "action_target"),
    _float("animationSpeed", "animation_speed"),
)

BUTTON_FIELDS: tuple[FieldSpec, ...] = _POSITION + (
    _int("width", "width"),
    _int("height", "height"),
    _str("texturePath", "texture_path"),
    _str("linkId", "link_id"),
    FieldSpec("linkedDoorIds", "linked_door_ids", FieldKind.STR_LIST,
              lambda button: bool(button.linked_door_ids)),
    _str("buttonType", "button_type"),
    _bool("activatedByPlayer", "activated_by_player"),
    _bool("activatedByMobs", "activated_by_mobs"),
    _bool("requiresInteraction", "requires_interaction"),
    _int("timedDuration", "timed_duration"),
    _str("actionType", "action_type"),
    _str("actionTarget", "action_target"),
    _float("animationSpeed", "animation_speed"),
)

VAULT_FIELDS: tuple[FieldSpec, ...] = _POSITION + (
    _int("width", "width"),
    _int("height", "height"),
    _str("texturePath", "texture_path"),
    _str("linkId", "link_id"),
    _str("vaultType", "vault_type"),
)

# The nested "frames" array is handled separately by binder and serializer
CUTSCENE_FIELDS: tuple[FieldSpec, ...] = (
    _str("id", "id"),
    _bool("playOnLevelStart", "play_on_level_start"),
    _bool("playOnce", "play_once"),
)

FRAMES_KEY = "frames"

FRAME_FIELDS: tuple[FieldSpec, ...] = (
    _str("gifPath", "gif_path"),
    _str("text", "text", lambda frame: frame.has_text()),
)


# =============================================================================
# Sections, in file order
# =============================================================================

SECTIONS: tuple[SectionSpec, ...] = (
    SectionSpec("parallaxLayers", "parallax_layers", ParallaxLayerData, PARALLAX_LAYER_FIELDS),
    SectionSpec("lightSources", "light_sources", LightSourceData, LIGHT_SOURCE_FIELDS),
    SectionSpec("platforms", "platforms", PlatformData, PLATFORM_FIELDS),
    SectionSpec("items", "items", ItemData, ITEM_FIELDS),
    SectionSpec("triggers", "triggers", TriggerData, TRIGGER_FIELDS),
    SectionSpec("blocks", "blocks", BlockData, BLOCK_FIELDS),
    SectionSpec("movingBlocks", "moving_blocks", MovingBlockData, MOVING_BLOCK_FIELDS),
    SectionSpec("mobs", "mobs", MobData, MOB_FIELDS),
    SectionSpec("doors", "doors", DoorData, DOOR_FIELDS),
    SectionSpec("buttons", "buttons", ButtonData, BUTTON_FIELDS),
    SectionSpec("vaults", "vaults", VaultData, VAULT_FIELDS),
    SectionSpec("cutscenes", "cutscenes", CutsceneData, CUTSCENE_FIELDS),
)
