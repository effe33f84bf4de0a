"""
Default configuration for annotation sessions.
"""

from typing import Dict, Tuple

from easydict import EasyDict as edict

from .state import TRIGGER_MODES, Trigger


def default_config() -> edict:
    cfg = edict()

    cfg.keys = edict()
    cfg.keys.quit = ["q", "ctrl+c"]
    cfg.keys.cancel = ["escape", "ctrl+c"]
    cfg.keys.forward = ["tab"]
    cfg.keys.backward = ["shift+tab"]
    cfg.keys.page_up = ["pageup"]
    cfg.keys.page_down = ["pagedown"]

    cfg.list = edict()
    cfg.list.numbered = True
    cfg.list.title = "Items to Annotate"

    cfg.detail = edict()
    cfg.detail.placeholder = "Type your annotation here..."
    cfg.detail.header_allowance = 4
    cfg.detail.border_allowance = 4

    cfg.blink_interval = 0.5
    return cfg


def build_keymap(keys: edict) -> Dict[str, Tuple[Trigger, ...]]:
    """
    Map key names to the triggers they fire.

    A key may fire one trigger per mode (``ctrl+c`` quits from the list
    and leaves the editor). Confirm is not bound here: selecting an entry
    of the list (enter or click) is reported by the list itself.
    """
    keymap: Dict[str, Tuple[Trigger, ...]] = {}
    for trigger in Trigger:
        for key in keys.get(trigger.value, ()):
            bound = keymap.get(key, ())
            for other in bound:
                if other is not trigger and TRIGGER_MODES[other] is TRIGGER_MODES[trigger]:
                    raise ValueError(
                        f"key {key!r} bound to both {other.value} and {trigger.value}"
                    )
            if trigger not in bound:
                keymap[key] = bound + (trigger,)
    return keymap
