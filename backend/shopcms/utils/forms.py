# shopcms/utils/forms.py
from __future__ import annotations

import re
from typing import Any, Dict, List

from flask import request
from werkzeug.datastructures import FileStorage, MultiDict
from werkzeug.exceptions import MethodNotAllowed

_KEY_PART = re.compile(r"\[([^\]]*)\]")


def _split_key(key: str) -> List[str]:
    head, bracket, rest = key.partition("[")
    if not bracket:
        return [head]
    return [head] + _KEY_PART.findall(bracket + rest)


def _listify(node: Any) -> Any:
    if isinstance(node, dict):
        node = {key: _listify(value) for key, value in node.items()}
        if node and all(key.isdigit() for key in node):
            return [node[key] for key in sorted(node, key=int)]
    return node


def _blank_to_none(node: Any) -> Any:
    if isinstance(node, dict):
        return {key: _blank_to_none(value) for key, value in node.items()}
    if isinstance(node, list):
        return [_blank_to_none(value) for value in node]
    if isinstance(node, str) and node.strip() == "":
        return None
    return node


def parse_nested(form: MultiDict) -> Dict[str, Any]:
    """
    Expand bracket-notation form keys into nested structures.

    ``sections[hero][title]=x`` → ``{"sections": {"hero": {"title": "x"}}}``
    ``images[]=a&images[]=b``   → ``{"images": ["a", "b"]}``
    ``cards[0][id]=7``          → ``{"cards": [{"id": "7"}]}``
    """
    tree: Dict[str, Any] = {}

    for key in form.keys():
        parts = _split_key(key)
        values = form.getlist(key)

        if parts[-1] == "":
            parts = parts[:-1]
            value: Any = values
        else:
            value = values[-1]

        node = tree
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = node[part] = {}
            node = child
        node[parts[-1]] = value

    return _listify(tree)


def request_payload() -> Dict[str, Any]:
    """
    Submitted data as a plain dict: JSON bodies as-is, form bodies expanded
    from bracket notation. Blank strings become None in both cases.
    """
    if request.is_json:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
    else:
        data = parse_nested(request.form)

    data.pop("_method", None)
    data.pop("csrf_token", None)
    return _blank_to_none(data)


def uploaded_file(name: str) -> FileStorage | None:
    file = request.files.get(name)
    if file is None or not file.filename:
        return None
    return file


def uploaded_files(name: str) -> List[FileStorage]:
    """All non-empty uploads sent as ``name``, ``name[]`` or ``name[N]``."""
    files: List[FileStorage] = []
    for key in request.files.keys():
        if key == name or key.startswith(f"{name}["):
            files.extend(f for f in request.files.getlist(key) if f and f.filename)
    return files


def require_method_override(expected: str) -> None:
    """
    Multipart updates arrive as POST with ``_method=PUT``. Plain PUT requests
    pass straight through.
    """
    if request.method == expected:
        return

    override = (request.form.get("_method") or request.headers.get("X-HTTP-Method-Override") or "").upper()
    if override != expected:
        raise MethodNotAllowed(valid_methods=[expected])


def keyed_uploads(name: str, field: str = "image") -> Dict[str, FileStorage]:
    """``sections[hero][image]`` uploads as ``{"hero": FileStorage}``."""
    files: Dict[str, FileStorage] = {}
    for key in request.files.keys():
        parts = _split_key(key)
        if len(parts) == 3 and parts[0] == name and parts[2] == field:
            file = request.files.get(key)
            if file is not None and file.filename:
                files[parts[1]] = file
    return files
