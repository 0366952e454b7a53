from __future__ import annotations

from typing import Dict, Optional, Sequence


def parse_items(items: Optional[Sequence[str]]) -> Dict[str, str]:
    """Parse ``KEY=VALUE`` tokens into a dict; later keys win.

    Raises:
        ValueError: If a token has no '=' or an empty key.
    """
    out: Dict[str, str] = {}
    for raw in items or ():
        key, sep, value = raw.partition('=')
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"expected KEY=VALUE, got {raw!r}")
        out[key] = value
    return out
