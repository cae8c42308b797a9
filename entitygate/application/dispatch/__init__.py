"""Authorize-then-act dispatch pipeline.

Usage:
    from entitygate.application.dispatch import DispatchPipeline, EntityBinding
"""

from entitygate.application.dispatch.pipeline import (
    Dispatched,
    DispatchPipeline,
    EntityBinding,
    Renderer,
)

__all__ = ["Dispatched", "DispatchPipeline", "EntityBinding", "Renderer"]
