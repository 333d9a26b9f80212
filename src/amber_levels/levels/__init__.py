"""
Level definitions: typed model, binding, serialization and file access.
"""

from .models import (
    LevelDefinition,
    PlatformData,
    ItemData,
    TriggerData,
    BlockData,
    MovingBlockData,
    MobData,
    DoorData,
    ButtonData,
    VaultData,
    CutsceneData,
    CutsceneFrameData,
    ParallaxLayerData,
    LightSourceData,
    DEFAULT_LEVEL_NAME,
)
from .presets import (
    DepthPreset,
    LightPreset,
    PresetTables,
    DEPTH_PRESETS,
    LIGHT_PRESETS,
    DEFAULT_PRESETS,
    FALLOFF_MULTIPLIER,
)
from .binder import LevelBinder, to_int, to_double, to_bool, to_str
from .serializer import LevelSerializer
from .metadata import LevelMetadata, extract_string_field, read_metadata
from .loader import LevelLoader
from .registry import LevelEntry, LevelRegistry, format_filename
from .builder import LevelBuilder

__all__ = [
    # Model
    "LevelDefinition",
    "PlatformData",
    "ItemData",
    "TriggerData",
    "BlockData",
    "MovingBlockData",
    "MobData",
    "DoorData",
    "ButtonData",
    "VaultData",
    "CutsceneData",
    "CutsceneFrameData",
    "ParallaxLayerData",
    "LightSourceData",
    "DEFAULT_LEVEL_NAME",
    # Presets
    "DepthPreset",
    "LightPreset",
    "PresetTables",
    "DEPTH_PRESETS",
    "LIGHT_PRESETS",
    "DEFAULT_PRESETS",
    "FALLOFF_MULTIPLIER",
    # Binding and serialization
    "LevelBinder",
    "to_int",
    "to_double",
    "to_bool",
    "to_str",
    "LevelSerializer",
    # Files
    "LevelMetadata",
    "extract_string_field",
    "read_metadata",
    "LevelLoader",
    "LevelEntry",
    "LevelRegistry",
    "format_filename",
    "LevelBuilder",
]
