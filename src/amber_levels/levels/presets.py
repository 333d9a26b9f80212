"""
Named presets for parallax depth levels and light source types.

The tables are built once at import time and exposed as read-only mappings.
The binder receives them through ``PresetTables`` rather than reaching for
module globals, so a caller can bind against a different set of presets.
Preset names are matched case-insensitively.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from .models import LightSourceData, ParallaxLayerData

# Falloff derived from an explicit radius when the document gives no falloff
FALLOFF_MULTIPLIER = 2.0


@dataclass(frozen=True)
class DepthPreset:
    """Defaults a parallax depth level applies to a layer."""
    z_order: int
    scroll_speed_x: float
    opacity: float

    def apply_to(self, layer: ParallaxLayerData) -> None:
        layer.z_order = self.z_order
        layer.scroll_speed_x = self.scroll_speed_x
        layer.opacity = self.opacity


@dataclass(frozen=True)
class LightPreset:
    """Defaults a light type applies to a light source."""
    radius: float
    falloff_radius: float
    color_red: int
    color_green: int
    color_blue: int
    flicker: bool
    flicker_amount: float = 0.15
    flicker_speed: float = 8.0

    def apply_to(self, light: LightSourceData) -> None:
        light.radius = self.radius
        light.falloff_radius = self.falloff_radius
        light.color_red = self.color_red
        light.color_green = self.color_green
        light.color_blue = self.color_blue
        light.flicker = self.flicker
        light.flicker_amount = self.flicker_amount
        light.flicker_speed = self.flicker_speed


_BACKGROUND = DepthPreset(z_order=-2, scroll_speed_x=0.1, opacity=1.0)
_DISTANT = DepthPreset(z_order=-1, scroll_speed_x=0.3, opacity=0.8)
_MID = DepthPreset(z_order=0, scroll_speed_x=0.5, opacity=0.9)
_NEAR = DepthPreset(z_order=1, scroll_speed_x=0.7, opacity=1.0)
_FOREGROUND = DepthPreset(z_order=2, scroll_speed_x=1.2, opacity=0.7)

DEPTH_PRESETS: Mapping[str, DepthPreset] = MappingProxyType({
    "background": _BACKGROUND,
    "sky": _BACKGROUND,
    "middleground_3": _DISTANT,
    "distant": _DISTANT,
    "middleground_2": _MID,
    "mid": _MID,
    "middleground_1": _NEAR,
    "near": _NEAR,
    "foreground": _FOREGROUND,
})

LIGHT_PRESETS: Mapping[str, LightPreset] = MappingProxyType({
    "torch": LightPreset(80.0, 180.0, 255, 200, 100, flicker=True, flicker_amount=0.15, flicker_speed=8.0),
    "campfire": LightPreset(120.0, 280.0, 255, 150, 50, flicker=True, flicker_amount=0.25, flicker_speed=6.0),
    # Lanterns keep the default flicker parameters but do not flicker
    "lantern": LightPreset(100.0, 200.0, 255, 240, 180, flicker=False),
    "magic": LightPreset(90.0, 180.0, 150, 150, 255, flicker=True, flicker_amount=0.1, flicker_speed=3.0),
    "crystal": LightPreset(60.0, 120.0, 100, 255, 200, flicker=True, flicker_amount=0.08, flicker_speed=2.0),
})


@dataclass(frozen=True)
class PresetTables:
    """Bundle of the preset lookups used while binding a level."""
    depth_levels: Mapping[str, DepthPreset] = field(default_factory=lambda: DEPTH_PRESETS)
    light_types: Mapping[str, LightPreset] = field(default_factory=lambda: LIGHT_PRESETS)
    falloff_multiplier: float = FALLOFF_MULTIPLIER

    def depth_preset(self, name: str) -> Optional[DepthPreset]:
        """Look up a depth preset, ignoring case."""
        return self.depth_levels.get(name.lower())

    def light_preset(self, name: str) -> Optional[LightPreset]:
        """Look up a light preset, ignoring case."""
        return self.light_types.get(name.lower())


DEFAULT_PRESETS = PresetTables()
