"""Fluent builder for constructing levels in code.

Example:
    level = (
        LevelBuilder()
        .name("Cave")
        .dimensions(3840, 1080)
        .scrolling_enabled(True)
        .add_block_row(0, 10, 30, "STONE", use_grid_coords=True)
        .add_light(200, 500, "torch")
        .build()
    )
"""

from typing import Optional

from .models import (
    BlockData,
    ItemData,
    LevelDefinition,
    LightSourceData,
    MobData,
    NO_COLOR,
    ParallaxLayerData,
    PlatformData,
    TriggerData,
)
from .presets import DEFAULT_PRESETS, PresetTables


class LevelBuilder:
    """Builds a ``LevelDefinition`` step by step.

    Every method returns the builder so calls can be chained. ``build``
    returns the level being built; the builder should not be reused after.
    """

    def __init__(self, presets: PresetTables = DEFAULT_PRESETS):
        self._level = LevelDefinition()
        self._presets = presets

    # -------------------------------------------------------------------------
    # Metadata and player
    # -------------------------------------------------------------------------

    def name(self, name: str) -> "LevelBuilder":
        self._level.name = name
        return self

    def description(self, description: str) -> "LevelBuilder":
        self._level.description = description
        return self

    def background(self, path: str) -> "LevelBuilder":
        self._level.background_path = path
        return self

    def music(self, path: str) -> "LevelBuilder":
        self._level.music_path = path
        return self

    def next_level(self, path: str) -> "LevelBuilder":
        self._level.next_level = path
        return self

    def player_spawn(self, x: int, y: int) -> "LevelBuilder":
        self._level.player_spawn_x = x
        self._level.player_spawn_y = y
        return self

    def player_sprite(self, path: str) -> "LevelBuilder":
        self._level.player_sprite_path = path
        return self

    def bone_animation(self, enabled: bool, texture_dir: Optional[str] = None) -> "LevelBuilder":
        """Toggle skeletal player animation, optionally setting the texture directory."""
        self._level.use_bone_animation = enabled
        if texture_dir is not None:
            self._level.bone_texture_dir = texture_dir
        return self

    def sprite_animation(self, enabled: bool, animation_dir: Optional[str] = None) -> "LevelBuilder":
        """Toggle GIF player animation, optionally setting the animation directory."""
        self._level.use_sprite_animation = enabled
        if animation_dir is not None:
            self._level.sprite_animation_dir = animation_dir
        return self

    # -------------------------------------------------------------------------
    # Geometry and camera
    # -------------------------------------------------------------------------

    def dimensions(self, width: int, height: int) -> "LevelBuilder":
        self._level.level_width = width
        self._level.level_height = height
        return self

    def ground_y(self, y: int) -> "LevelBuilder":
        self._level.ground_y = y
        return self

    def scrolling_enabled(self, enabled: bool) -> "LevelBuilder":
        self._level.scrolling_enabled = enabled
        return self

    def tile_background(self, horizontal: bool, vertical: bool) -> "LevelBuilder":
        self._level.tile_background_horizontal = horizontal
        self._level.tile_background_vertical = vertical
        return self

    def vertical_scroll(self, enabled: bool, margin: Optional[int] = None) -> "LevelBuilder":
        """Toggle vertical scrolling; ``margin`` sets the letterbox height."""
        self._level.vertical_scroll_enabled = enabled
        if margin is not None:
            self._level.vertical_margin = margin
        return self

    # -------------------------------------------------------------------------
    # Entities
    # -------------------------------------------------------------------------

    def add_platform(
        self,
        x: int,
        y: int,
        sprite_path: str = PlatformData.sprite_path,
        solid: bool = True,
        mask: tuple[int, int, int] = (NO_COLOR, NO_COLOR, NO_COLOR),
    ) -> "LevelBuilder":
        red, green, blue = mask
        self._level.platforms.append(
            PlatformData(x, y, sprite_path, solid, mask_red=red, mask_green=green, mask_blue=blue)
        )
        return self

    def add_item(
        self,
        x: int,
        y: int,
        item_name: str,
        item_type: str = ItemData.item_type,
        sprite_path: str = ItemData.sprite_path,
        item_id: str = "",
    ) -> "LevelBuilder":
        self._level.items.append(
            ItemData(x, y, sprite_path=sprite_path, item_name=item_name, item_type=item_type, item_id=item_id)
        )
        return self

    def add_trigger(self, x: int, y: int, width: int, height: int, type: str, target: str) -> "LevelBuilder":
        self._level.triggers.append(TriggerData(x, y, width, height, type, target))
        return self

    def add_block(
        self,
        x: int,
        y: int,
        block_type: str,
        use_grid_coords: bool = False,
        tint: tuple[int, int, int] = (NO_COLOR, NO_COLOR, NO_COLOR),
        overlay: str = "",
    ) -> "LevelBuilder":
        red, green, blue = tint
        self._level.blocks.append(
            BlockData(
                x, y, block_type, use_grid_coords,
                overlay=overlay, tint_red=red, tint_green=green, tint_blue=blue,
            )
        )
        return self

    def add_block_row(
        self, start_x: int, y: int, count: int, block_type: str, use_grid_coords: bool = False
    ) -> "LevelBuilder":
        """Add ``count`` blocks left to right, one unit apart (floors)."""
        for i in range(count):
            self.add_block(start_x + i, y, block_type, use_grid_coords)
        return self

    def add_block_column(
        self, x: int, start_y: int, count: int, block_type: str, use_grid_coords: bool = False
    ) -> "LevelBuilder":
        """Add ``count`` blocks top to bottom (walls)."""
        for i in range(count):
            self.add_block(x, start_y + i, block_type, use_grid_coords)
        return self

    def add_block_rect(
        self,
        start_x: int,
        start_y: int,
        width: int,
        height: int,
        block_type: str,
        use_grid_coords: bool = False,
    ) -> "LevelBuilder":
        """Add a filled rectangle of blocks, row by row."""
        for dy in range(height):
            self.add_block_row(start_x, start_y + dy, width, block_type, use_grid_coords)
        return self

    def add_mob(self, x: int, y: int, mob_type: str, sub_type: str, behavior: str = "hostile") -> "LevelBuilder":
        self._level.mobs.append(MobData(x, y, mob_type=mob_type, sub_type=sub_type, behavior=behavior))
        return self

    def add_quadruped_mob(self, x: int, y: int, animal_type: str, behavior: str) -> "LevelBuilder":
        return self.add_mob(x, y, "quadruped", animal_type, behavior)

    def add_humanoid_mob(self, x: int, y: int, variant_type: str) -> "LevelBuilder":
        return self.add_mob(x, y, "humanoid", variant_type, "hostile")

    # -------------------------------------------------------------------------
    # Parallax and lighting
    # -------------------------------------------------------------------------

    def parallax_enabled(self, enabled: bool) -> "LevelBuilder":
        self._level.parallax_enabled = enabled
        return self

    def add_parallax_layer(
        self,
        name: str,
        image_path: str,
        depth_level: Optional[str] = None,
        **overrides: object,
    ) -> "LevelBuilder":
        """Add a parallax layer.

        Args:
            name: Layer name
            image_path: Layer image
            depth_level: Optional depth preset applied before ``overrides``
            **overrides: Any other ``ParallaxLayerData`` attribute, e.g.
                ``scroll_speed_x=0.2, z_order=-1``
        """
        layer = ParallaxLayerData(name=name, image_path=image_path)
        if depth_level:
            layer.depth_level = depth_level
            preset = self._presets.depth_preset(depth_level)
            if preset is not None:
                preset.apply_to(layer)
        for attr, value in overrides.items():
            if not hasattr(layer, attr):
                raise AttributeError(f"ParallaxLayerData has no attribute '{attr}'")
            setattr(layer, attr, value)
        self._level.parallax_layers.append(layer)
        return self

    def night_mode(self, enabled: bool, darkness: Optional[float] = None,
                   ambient: Optional[float] = None) -> "LevelBuilder":
        self._level.night_mode = enabled
        if darkness is not None:
            self._level.night_darkness = darkness
        if ambient is not None:
            self._level.ambient_light = ambient
        return self

    def player_light(self, enabled: bool, radius: Optional[float] = None,
                     falloff: Optional[float] = None) -> "LevelBuilder":
        self._level.player_light_enabled = enabled
        if radius is not None:
            self._level.player_light_radius = radius
        if falloff is not None:
            self._level.player_light_falloff = falloff
        return self

    def add_light(self, x: int, y: int, light_type: str = "torch",
                  radius: Optional[float] = None) -> "LevelBuilder":
        """Add a light source configured from a light preset.

        An explicit ``radius`` replaces the preset radius and the falloff
        becomes ``radius * falloff_multiplier``, the same rule the loader
        applies to files.
        """
        light = LightSourceData(x, y, light_type=light_type)
        preset = self._presets.light_preset(light_type)
        if preset is not None:
            preset.apply_to(light)
        if radius is not None:
            light.radius = radius
            light.falloff_radius = radius * self._presets.falloff_multiplier
        self._level.light_sources.append(light)
        return self

    def build(self) -> LevelDefinition:
        return self._level
