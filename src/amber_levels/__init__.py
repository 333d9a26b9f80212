"""
amber_levels: level definition files for a 2D side-scrolling game

Parses level documents, binds them to a typed model with preset defaults,
and writes them back out.
"""

__version__ = "0.1.0"
__author__ = "amber_levels Contributors"

from .errors import LevelError, DocumentSyntaxError, LevelBindError, LevelSerializeError
from .levels import (
    LevelDefinition,
    LevelLoader,
    LevelBinder,
    LevelSerializer,
    LevelBuilder,
    LevelRegistry,
    LevelEntry,
    LevelMetadata,
    extract_string_field,
)
from .utils.logging_config import setup_logging

__all__ = [
    # Loading and saving
    'LevelLoader',
    'LevelBinder',
    'LevelSerializer',
    'LevelBuilder',
    'LevelRegistry',
    'LevelEntry',
    'LevelMetadata',
    'extract_string_field',

    # Model
    'LevelDefinition',

    # Errors
    'LevelError',
    'DocumentSyntaxError',
    'LevelBindError',
    'LevelSerializeError',

    # Logging
    'setup_logging',
]
