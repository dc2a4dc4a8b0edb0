"""Rename generated class/id tokens in HTML/CSS to short, stable names."""

from .classify import RenameMode, should_rename_class, should_rename_id
from .naming import build_mapping
from .pipeline import RenameResult, rename_tokens
from .scripts import RelocationResult, relocate_scripts

__version__ = "0.1.0"
