import re
from typing import Any, Dict, Iterable, List, Optional, Tuple

_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")


def clean_update_input(input: Optional[Dict[str, Any]], immutable: Iterable[str] = ()) -> Dict[str, Any]:
    """Drops null values and fields callers may not overwrite."""
    if not isinstance(input, dict):
        return {}
    blocked = set(immutable)
    return {k: v for k, v in input.items() if v is not None and k not in blocked}


def parse_int_prefix(value: Any) -> Optional[int]:
    """Reads a leading integer the way query strings are usually parsed:
    "3" -> 3, "3abc" -> 3, "2.9" -> 2, "abc" -> None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    match = _INT_PREFIX.match(str(value))
    return int(match.group(1)) if match else None


def coerce_positive_int(value: Any, default: int) -> int:
    parsed = parse_int_prefix(value)
    if parsed is None or parsed < 1:
        return default
    return parsed


_BRACKET_PART = re.compile(r"\[([^\[\]]*)\]")


def _form_key_path(key: str) -> List[str]:
    head, sep, rest = key.partition("[")
    if not sep:
        return [key]
    return [head] + _BRACKET_PART.findall(sep + rest)


def _listify(node: Any) -> Any:
    if not isinstance(node, dict):
        return node
    node = {k: _listify(v) for k, v in node.items()}
    if node and all(k.isdigit() for k in node):
        return [node[k] for k in sorted(node, key=int)]
    return node


def expand_form_input(pairs: Iterable[Tuple[str, str]]) -> Dict[str, Any]:
    """Builds a nested payload from bracketed form keys.

    `personalInfo[fullName]=A` -> {"personalInfo": {"fullName": "A"}},
    `skills[0][items][]=Go` -> {"skills": [{"items": ["Go"]}]}. A key given
    more than once collects its values into a list.
    """
    root: Dict[str, Any] = {}
    for key, value in pairs:
        path = _form_key_path(key)
        node = root
        for i, part in enumerate(path):
            if part == "":
                part = str(len(node))
            if i == len(path) - 1:
                if part in node:
                    existing = node[part]
                    node[part] = (existing if isinstance(existing, list) else [existing]) + [value]
                else:
                    node[part] = value
                break
            child = node.setdefault(part, {})
            if not isinstance(child, dict):
                break
            node = child
    return _listify(root)
