"""Display formatting for evaluated values.

    - Void     -> nothing (None)
    - Bool     -> true / false
    - Integer  -> decimal literal
    - Symbol   -> double-quoted name
    - Lambda   -> multi-line dump of parameters and body
    - List     -> debug form, e.g. List([Integer(4), Bool(true)])
"""

from __future__ import annotations

import json
from typing import Optional

from lispir import LispValue
from lispir.types.lambda_fn import Lambda
from lispir.types.symbol import Symbol
from lispir.types.void import VoidType


def _quote(name: str) -> str:
    return json.dumps(name, ensure_ascii=False)


def debug_form(value: LispValue) -> str:
    """Structural form of a value, used for list elements and lambda bodies."""
    match value:
        case VoidType():
            return "Void"
        case bool():
            return f"Bool({'true' if value else 'false'})"
        case int():
            return f"Integer({value})"
        case Symbol():
            return f"Symbol({_quote(str(value))})"
        case Lambda():
            params = ", ".join(_quote(str(p)) for p in value.formals)
            body = ", ".join(debug_form(e) for e in value.body)
            return f"Lambda([{params}], [{body}])"
        case list():
            return "List([" + ", ".join(debug_form(e) for e in value) + "])"
    return repr(value)


def format_value(value: LispValue) -> Optional[str]:
    """Text to display for `value`, or None when nothing should be printed."""
    match value:
        case VoidType():
            return None
        case bool():
            return "true" if value else "false"
        case int():
            return str(value)
        case Symbol():
            return _quote(str(value))
        case Lambda():
            lines = ["Lambda("]
            lines.extend(f"  {_quote(str(p))}" for p in value.formals)
            lines.append(")")
            lines.extend(f"  {debug_form(e)}" for e in value.body)
            return "\n".join(lines)
        case list():
            return debug_form(value)
    return repr(value)
