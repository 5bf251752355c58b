"""Shared types for SystemCSS."""

from .config import PreprocessorConfig, RoleTable
from .dsl import CallDefinition, Role, TargetAbstraction

__all__ = [
    "CallDefinition",
    "PreprocessorConfig",
    "Role",
    "RoleTable",
    "TargetAbstraction",
]
