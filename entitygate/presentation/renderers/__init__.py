"""Response renderers.

A renderer is ``async (session, value, identity) -> Result[body, DispatchError]``.
"""

from entitygate.presentation.renderers.json_renderer import (
    JsonListRenderer,
    JsonRenderer,
)

__all__ = ["JsonListRenderer", "JsonRenderer"]
