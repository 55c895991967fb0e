from __future__ import annotations

import json


def toml_string(value: str) -> str:
    """Quote a value as a TOML basic string.

    TOML rejects surrogate-pair escapes and a raw DEL, so non-ASCII text is
    written as-is and DEL is escaped explicitly.
    """
    return json.dumps(value, ensure_ascii=False).replace("\x7f", "\\u007f")
