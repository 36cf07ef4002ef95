"""
Outside click component wrapper for react-outside-click-handler.

The wrapped component adds a document-level pointer-down listener when it
mounts and removes it when it unmounts, and calls on_outside_click for
events whose target is outside its children.
"""

import reflex as rx


class OutsideClickHandler(rx.NoSSRComponent):
    """Wrapper for react-outside-click-handler."""

    library = "react-outside-click-handler@1.3.0"
    tag = "OutsideClickHandler"
    is_default = True

    on_outside_click: rx.EventHandler

    disabled: bool = False
    use_capture: bool = True
    display: str = "block"
