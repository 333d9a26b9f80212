"""
Typed level model.

A ``LevelDefinition`` is what the binder produces from a parsed document and
what the serializer writes back out. Every field has a fixed default, so a
freshly constructed instance is already a complete, loadable level.

Relationships between entities (a button opening doors, a door needing a
key item) are plain string identifiers. Resolving them is up to the game
scene that consumes the model.
"""

from dataclasses import dataclass, field
from typing import List

# Fallback dimensions match the game's landscape screen
DEFAULT_LEVEL_WIDTH = 1920
DEFAULT_LEVEL_HEIGHT = 1080
DEFAULT_GROUND_Y = 720

DEFAULT_LEVEL_NAME = "Untitled Level"

# Colour channels use -1 for "not set"
NO_COLOR = -1


# =============================================================================
# Terrain and placement entities
# =============================================================================

@dataclass
class PlatformData:
    """Static platform or obstacle sprite.

    Attributes:
        x: Left position in pixels
        y: Top position in pixels
        sprite_path: Image drawn for the platform
        solid: Whether the player collides with it
        mask_red: Optional colour mask channel (0-255, -1 = no mask)
        mask_green: Optional colour mask channel
        mask_blue: Optional colour mask channel
    """

    x: int = 0
    y: int = 0
    sprite_path: str = "assets/obstacle.png"
    solid: bool = True
    mask_red: int = NO_COLOR
    mask_green: int = NO_COLOR
    mask_blue: int = NO_COLOR

    def has_color_mask(self) -> bool:
        """True when any mask channel is set; unset channels are written as -1."""
        return max(self.mask_red, self.mask_green, self.mask_blue) >= 0


@dataclass
class ItemData:
    """Collectible item placed in the level."""

    x: int = 0
    y: int = 0
    sprite_path: str = "assets/obstacle.png"
    item_name: str = ""
    item_type: str = "collectible"
    item_id: str = ""
    """Item registry id; empty means the item is described by name/type only."""


@dataclass
class TriggerData:
    """Invisible zone that fires an event (level transition, script, ...)."""

    x: int = 0
    y: int = 0
    width: int = 64
    height: int = 64
    type: str = "level_transition"
    target: str = ""
    """Event target, e.g. next level path or event name."""


@dataclass
class BlockData:
    """Destructible square block.

    Blocks can be placed in pixel or grid coordinates.

    Attributes:
        block_type: Block type name (e.g. "GRASS", "STONE")
        use_grid_coords: If True, x/y are grid cells instead of pixels
        overlay: Optional surface overlay (GRASS, SNOW, ICE, MOSS, VINES)
        tint_red: Optional tint channel (0-255, -1 = no tint)
    """

    x: int = 0
    y: int = 0
    block_type: str = "DIRT"
    use_grid_coords: bool = False
    overlay: str = ""
    tint_red: int = NO_COLOR
    tint_green: int = NO_COLOR
    tint_blue: int = NO_COLOR

    def has_tint(self) -> bool:
        """True when any tint channel is set; unset channels are written as -1."""
        return max(self.tint_red, self.tint_green, self.tint_blue) >= 0


@dataclass
class MovingBlockData:
    """Block that travels along a pattern.

    Attributes:
        movement_pattern: HORIZONTAL, VERTICAL, CIRCULAR or PATH
        end_x: End point for HORIZONTAL/VERTICAL movement
        end_y: End point for HORIZONTAL/VERTICAL movement
        speed: Pixels per frame
        pause_time: Frames to wait at each end
        radius: Circle radius for CIRCULAR movement
        waypoints: Encoded waypoint list for PATH movement
    """

    x: int = 0
    y: int = 0
    block_type: str = "DIRT"
    use_grid_coords: bool = False
    movement_pattern: str = "HORIZONTAL"
    end_x: int = 0
    end_y: int = 0
    speed: float = 2.0
    pause_time: int = 30
    radius: float = 0.0
    waypoints: str = ""
    tint_red: int = NO_COLOR
    tint_green: int = NO_COLOR
    tint_blue: int = NO_COLOR

    def has_tint(self) -> bool:
        """True when any tint channel is set; unset channels are written as -1."""
        return max(self.tint_red, self.tint_green, self.tint_blue) >= 0

    def has_waypoints(self) -> bool:
        return bool(self.waypoints)

    def has_radius(self) -> bool:
        """True when the radius means something for this block."""
        return self.movement_pattern == "CIRCULAR" or self.radius != 0.0


@dataclass
class MobData:
    """AI-controlled creature spawn.

    ``mob_type`` is "quadruped" or "humanoid"; ``sub_type`` names the animal
    or variant (wolf, zombie, ...). Wander bounds of -1 mean "use default".
    """

    x: int = 0
    y: int = 0
    mob_type: str = ""
    sub_type: str = ""
    behavior: str = "hostile"
    texture_dir: str = ""
    sprite_dir: str = ""
    wander_min_x: float = -1.0
    wander_max_x: float = -1.0
    debug_draw: bool = False


# =============================================================================
# Interactive entities
# =============================================================================

@dataclass
class DoorData:
    """Interactive door.

    ``link_id`` is what buttons refer to; ``key_item_id`` names the item that
    unlocks the door when ``locked`` is set.
    """

    x: int = 0
    y: int = 0
    width: int = 64
    height: int = 128
    texture_path: str = ""
    link_id: str = ""
    starts_open: bool = False
    locked: bool = False
    key_item_id: str = ""
    action_type: str = "NONE"
    action_target: str = ""
    animation_speed: float = 0.05


@dataclass
class ButtonData:
    """Button or switch that can open linked doors."""

    x: int = 0
    y: int = 0
    width: int = 32
    height: int = 16
    texture_path: str = ""
    link_id: str = ""
    linked_door_ids: List[str] = field(default_factory=lambda: [])  # type: ignore[return-value]
    button_type: str = "TOGGLE"
    activated_by_player: bool = True
    activated_by_mobs: bool = False
    requires_interaction: bool = False
    timed_duration: int = 3000
    """Milliseconds a TIMED button stays pressed."""
    action_type: str = "NONE"
    action_target: str = ""
    animation_speed: float = 0.1


@dataclass
class VaultData:
    """Storage container (chest, vault, pottery)."""

    x: int = 0
    y: int = 0
    width: int = 64
    height: int = 64
    texture_path: str = ""
    link_id: str = ""
    vault_type: str = "STORAGE_CHEST"


# =============================================================================
# Cutscenes
# =============================================================================

@dataclass
class CutsceneFrameData:
    """One animated frame of a cutscene with optional caption."""

    gif_path: str = ""
    text: str = ""

    def has_text(self) -> bool:
        return bool(self.text)


@dataclass
class CutsceneData:
    """Short scripted sequence of frames."""

    id: str = ""
    play_on_level_start: bool = False
    play_once: bool = True
    frames: List[CutsceneFrameData] = field(default_factory=lambda: [])  # type: ignore[return-value]


# =============================================================================
# Background and lighting
# =============================================================================

@dataclass
class ParallaxLayerData:
    """Parallax background layer.

    Layers are drawn by ``z_order`` (lower = further back). ``depth_level``
    names a preset that fills in z-order, scroll speed and opacity.

    Attributes:
        name: Layer identifier
        image_path: Path to the layer image
        depth_level: Optional depth preset name ("background", "near", ...)
        scroll_speed_x: 0.0 = static, 1.0 = moves with the world
        scroll_speed_y: Vertical scroll factor
        z_order: Depth sort key
        scale: Image scale factor
        opacity: 0.0 - 1.0
        tile_horizontal: Repeat the image horizontally
        tile_vertical: Repeat the image vertically
        offset_x: Base X offset
        offset_y: Base Y offset
        anchor_bottom: If True, offset_y is measured from the viewport bottom
    """

    name: str = ""
    image_path: str = ""
    depth_level: str = ""
    scroll_speed_x: float = 0.5
    scroll_speed_y: float = 0.0
    z_order: int = 0
    scale: float = 10.0
    opacity: float = 1.0
    tile_horizontal: bool = True
    tile_vertical: bool = False
    offset_x: int = 0
    offset_y: int = 0
    anchor_bottom: bool = False


@dataclass
class LightSourceData:
    """Static point light.

    ``light_type`` names a preset (torch, campfire, lantern, magic, crystal).
    ``radius`` is the fully lit inner radius, ``falloff_radius`` the distance
    at which the light fades to nothing.
    """

    x: int = 0
    y: int = 0
    light_type: str = "torch"
    radius: float = 80.0
    falloff_radius: float = 180.0
    color_red: int = 255
    color_green: int = 200
    color_blue: int = 100
    intensity: float = 1.0
    flicker: bool = False
    flicker_amount: float = 0.15
    flicker_speed: float = 8.0


# =============================================================================
# Level
# =============================================================================

@dataclass
class LevelDefinition:
    """Complete configuration of one level.

    Collections are always lists (possibly empty) and keep document order.
    """

    # Metadata
    name: str = DEFAULT_LEVEL_NAME
    description: str = ""
    background_path: str = "assets/background.png"
    music_path: str = "sounds/music.wav"
    next_level: str = ""

    # Player
    player_spawn_x: int = 100
    player_spawn_y: int = 620
    player_sprite_path: str = "assets/player.png"
    use_bone_animation: bool = False
    bone_texture_dir: str = "assets/textures/humanoid/player"
    use_sprite_animation: bool = False
    sprite_animation_dir: str = "assets/player/sprites"

    # Geometry and camera
    level_width: int = DEFAULT_LEVEL_WIDTH
    level_height: int = DEFAULT_LEVEL_HEIGHT
    ground_y: int = DEFAULT_GROUND_Y
    scrolling_enabled: bool = False
    tile_background_horizontal: bool = False
    tile_background_vertical: bool = False
    vertical_scroll_enabled: bool = False
    vertical_margin: int = 0
    """Height of the black bars at top and bottom, in pixels."""

    # Lighting
    night_mode: bool = False
    night_darkness: float = 0.80
    ambient_light: float = 0.12
    player_light_enabled: bool = False
    player_light_radius: float = 100.0
    player_light_falloff: float = 200.0

    parallax_enabled: bool = False

    # Entity collections
    parallax_layers: List[ParallaxLayerData] = field(default_factory=lambda: [])  # type: ignore[return-value]
    light_sources: List[LightSourceData] = field(default_factory=lambda: [])  # type: ignore[return-value]
    platforms: List[PlatformData] = field(default_factory=lambda: [])  # type: ignore[return-value]
    items: List[ItemData] = field(default_factory=lambda: [])  # type: ignore[return-value]
    triggers: List[TriggerData] = field(default_factory=lambda: [])  # type: ignore[return-value]
    blocks: List[BlockData] = field(default_factory=lambda: [])  # type: ignore[return-value]
    moving_blocks: List[MovingBlockData] = field(default_factory=lambda: [])  # type: ignore[return-value]
    mobs: List[MobData] = field(default_factory=lambda: [])  # type: ignore[return-value]
    doors: List[DoorData] = field(default_factory=lambda: [])  # type: ignore[return-value]
    buttons: List[ButtonData] = field(default_factory=lambda: [])  # type: ignore[return-value]
    vaults: List[VaultData] = field(default_factory=lambda: [])  # type: ignore[return-value]
    cutscenes: List[CutsceneData] = field(default_factory=lambda: [])  # type: ignore[return-value]

    def summary(self) -> str:
        """One-line entity counts, used in log messages."""
        return (
            f"{len(self.platforms)} platforms, {len(self.items)} items, "
            f"{len(self.triggers)} triggers, {len(self.blocks)} blocks, "
            f"{len(self.moving_blocks)} moving blocks, {len(self.mobs)} mobs, "
            f"{len(self.doors)} doors, {len(self.buttons)} buttons, "
            f"{len(self.vaults)} vaults, {len(self.cutscenes)} cutscenes, "
            f"{len(self.parallax_layers)} parallax layers, "
            f"{len(self.light_sources)} light sources"
        )

    def __repr__(self) -> str:
        return (
            f"LevelDefinition(name={self.name!r}, platforms={len(self.platforms)}, "
            f"items={len(self.items)}, blocks={len(self.blocks)}, mobs={len(self.mobs)})"
        )
