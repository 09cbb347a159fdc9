"""String cleanup shared by the parser and the processors."""

import re
from typing import Any

# Unicode White_Space characters. str.strip() would also remove the
# information separators U+001C..U+001F, which are kept as content.
WHITESPACE = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

# json.loads already joins valid surrogate pairs, so any surrogate left is unpaired.
_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def trim_space(value: str) -> str:
    """Strip leading and trailing Unicode whitespace."""
    return value.strip(WHITESPACE)


def _replace_in_string(value: str) -> str:
    return _LONE_SURROGATE.sub("\ufffd", value)


def replace_lone_surrogates(data: Any) -> Any:
    """
    Replace unpaired surrogates in decoded strings and keys with U+FFFD.

    Containers are rewritten in place without recursion, so any document
    the decoder accepted can be cleaned.

    Args:
        data: Freshly decoded JSON value

    Returns:
        The cleaned value (the same object for containers)
    """
    if isinstance(data, str):
        return _replace_in_string(data)

    pending = [data]
    while pending:
        node = pending.pop()
        if isinstance(node, dict):
            items = list(node.items())
            node.clear()
            for key, value in items:
                if isinstance(value, str):
                    value = _replace_in_string(value)
                elif isinstance(value, (dict, list)):
                    pending.append(value)
                # Keys that collide after replacement keep the later value.
                node[_replace_in_string(key)] = value
        elif isinstance(node, list):
            for index, value in enumerate(node):
                if isinstance(value, str):
                    node[index] = _replace_in_string(value)
                elif isinstance(value, (dict, list)):
                    pending.append(value)
    return data
