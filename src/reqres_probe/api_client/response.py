"""
Generic API response wrapper for API clients.

Provides consistent interface regardless of underlying HTTP library, plus a
schema-less JSON tree with typed accessors that fail loudly on a lookup miss.
"""
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

from .exceptions import ResponseBodyError, ResponseFieldError

_MISSING = object()


def _split_path(path: str) -> List[str]:
    if not path:
        raise ValueError("Field path must not be empty")
    return path.split('.')


def _to_json_text(value: Any) -> str:
    """Render a JSON scalar the way it appears in the document."""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class JsonTree:
    """Read-only view over a parsed JSON document.

    Paths are dotted (``data.id``); list elements are addressed by their
    index (``data.0.email``).
    """

    def __init__(self, document: Union[Dict[str, Any], List[Any], Any]):
        self._document = document

    @property
    def raw(self) -> Any:
        """The underlying parsed document."""
        return self._document

    def _lookup(self, path: str) -> Any:
        node = self._document
        walked = []
        for segment in _split_path(path):
            walked.append(segment)
            if isinstance(node, dict):
                if segment not in node:
                    raise ResponseFieldError(path, f"key '{'.'.join(walked)}' is absent")
                node = node[segment]
            elif isinstance(node, list):
                if not (segment.isascii() and segment.isdigit()) or int(segment) >= len(node):
                    raise ResponseFieldError(path, f"index '{'.'.join(walked)}' is out of range")
                node = node[int(segment)]
            else:
                raise ResponseFieldError(
                    path, f"'{'.'.join(walked[:-1])}' is a {type(node).__name__}, not an object or list"
                )
        return node

    def get(self, path: str) -> Any:
        """Return the value at ``path``; raises ResponseFieldError if absent."""
        return self._lookup(path)

    def get_str(self, path: str) -> str:
        """Return the scalar at ``path`` converted to a string."""
        value = self._lookup(path)
        if value is None:
            raise ResponseFieldError(path, "value is null")
        if isinstance(value, (dict, list)):
            raise ResponseFieldError(path, f"expected a scalar, found {type(value).__name__}")
        return _to_json_text(value)

    def get_int(self, path: str) -> int:
        value = self._lookup(path)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ResponseFieldError(path, f"expected an integer, found {type(value).__name__}")
        return value

    def get_list(self, path: str) -> List[Any]:
        value = self._lookup(path)
        if not isinstance(value, list):
            raise ResponseFieldError(path, f"expected a list, found {type(value).__name__}")
        return value

    def get_dict(self, path: str) -> Dict[str, Any]:
        value = self._lookup(path)
        if not isinstance(value, dict):
            raise ResponseFieldError(path, f"expected an object, found {type(value).__name__}")
        return value

    def require(self, path: str) -> Any:
        """Return the value at ``path``, rejecting both absent and null fields."""
        value = self._lookup(path)
        if value is None:
            raise ResponseFieldError(path, "value is null")
        return value

    def contains(self, path: str) -> bool:
        try:
            self._lookup(path)
        except ResponseFieldError:
            return False
        return True

    def __getitem__(self, key):
        if isinstance(key, int):
            key = str(key)
        value = self._lookup(key)
        if isinstance(value, (dict, list)):
            return JsonTree(value)
        return value

    def __contains__(self, key) -> bool:
        return self.contains(str(key))

    def __eq__(self, other):
        if isinstance(other, JsonTree):
            return self._document == other._document
        return self._document == other

    def __repr__(self):
        return f"JsonTree({self._document!r})"


@dataclass
class APIResponse:
    """Unified response wrapper for both in-memory and HTTP API clients.

    The body is kept as raw text and only parsed when a scenario asks for it,
    so status-only checks never trip over an empty or non-JSON body.
    """
    status_code: int
    text: str
    headers: Dict[str, str]
    elapsed: float = 0.0
    _parsed: Any = field(default=_MISSING, init=False, repr=False, compare=False)

    def json(self) -> Any:
        """Parse the body as JSON (once) and return the plain document."""
        if self._parsed is _MISSING:
            try:
                self._parsed = json.loads(self.text)
            except ValueError as e:
                raise ResponseBodyError(self.status_code, self.text, e) from e
        return self._parsed

    @property
    def data(self) -> JsonTree:
        """Return the parsed body as a JsonTree."""
        return JsonTree(self.json())

    @property
    def has_body(self) -> bool:
        return bool(self.text and self.text.strip())
