# ruff: noqa: N812

from .employees import blp as BlueprintEmployees
from .health import blp as BlueprintHealth
from .hierarchy import blp as BlueprintHierarchy

__all__ = ['BlueprintEmployees', 'BlueprintHealth', 'BlueprintHierarchy']
