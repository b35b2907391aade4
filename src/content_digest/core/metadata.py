"""
Tagged-union value type for scraper metadata.

The scraper hands over arbitrary nested JSON (JSON-LD arrays, Open Graph
maps, meta-tag maps). MetaValue wraps any such value in an explicit
variant so the analysis code can read it through tolerant accessors
instead of isinstance checks scattered across the pipeline.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator


class MetaKind(str, Enum):
    """Variant tag for a metadata value."""

    NULL = "null"
    STRING = "string"
    NUMBER = "number"
    BOOL = "bool"
    LIST = "list"
    MAP = "map"


@dataclass(frozen=True)
class MetaValue:
    """
    A JSON-like value tagged with its kind.

    LIST values hold a tuple of MetaValue, MAP values hold a dict of
    str -> MetaValue. Accessors never raise; asking a value for the wrong
    variant yields None or an empty collection.

    Example:
        >>> meta = MetaValue.from_json({"openGraph": {"type": "article"}})
        >>> meta.get("openGraph").get("type").as_str()
        'article'
        >>> meta.get("missing").get("type").as_str() is None
        True
    """

    kind: MetaKind
    value: Any = None

    @classmethod
    def from_json(cls, obj: Any) -> "MetaValue":
        """
        Build a MetaValue from a decoded JSON object.

        Unknown Python objects are coerced to their string form.
        """
        if isinstance(obj, MetaValue):
            return obj
        if obj is None:
            return NULL
        # bool must be checked before int
        if isinstance(obj, bool):
            return cls(MetaKind.BOOL, obj)
        if isinstance(obj, (int, float)):
            return cls(MetaKind.NUMBER, obj)
        if isinstance(obj, str):
            return cls(MetaKind.STRING, obj)
        if isinstance(obj, (list, tuple)):
            return cls(MetaKind.LIST, tuple(cls.from_json(item) for item in obj))
        if isinstance(obj, dict):
            return cls(
                MetaKind.MAP,
                {str(key): cls.from_json(val) for key, val in obj.items()},
            )
        return cls(MetaKind.STRING, str(obj))

    @property
    def is_null(self) -> bool:
        return self.kind == MetaKind.NULL

    def as_str(self) -> str | None:
        """Return the string payload, or None for any other variant."""
        if self.kind == MetaKind.STRING:
            return self.value
        return None

    def as_number(self) -> float | None:
        if self.kind == MetaKind.NUMBER:
            return float(self.value)
        return None

    def as_bool(self) -> bool | None:
        if self.kind == MetaKind.BOOL:
            return self.value
        return None

    def as_list(self) -> list["MetaValue"]:
        """Return list items, or an empty list for any other variant."""
        if self.kind == MetaKind.LIST:
            return list(self.value)
        return []

    def as_map(self) -> dict[str, "MetaValue"]:
        """Return map entries, or an empty dict for any other variant."""
        if self.kind == MetaKind.MAP:
            return dict(self.value)
        return {}

    def get(self, key: str) -> "MetaValue":
        """
        Look up a key in a MAP value.

        Returns NULL when this value is not a map or the key is absent,
        so lookups can be chained safely.
        """
        if self.kind == MetaKind.MAP:
            return self.value.get(key, NULL)
        return NULL

    def iter_maps(self) -> Iterator["MetaValue"]:
        """
        Iterate over the map values contained in this value.

        A single MAP yields itself; a LIST yields its MAP items. Used for
        fields like JSON-LD that may be either an object or an array.
        """
        if self.kind == MetaKind.MAP:
            yield self
        elif self.kind == MetaKind.LIST:
            for item in self.value:
                if item.kind == MetaKind.MAP:
                    yield item

    def iter_strings(self) -> Iterator[str]:
        """Iterate over string payloads of a STRING or a LIST of strings."""
        if self.kind == MetaKind.STRING:
            yield self.value
        elif self.kind == MetaKind.LIST:
            for item in self.value:
                if item.kind == MetaKind.STRING:
                    yield item.value

    def to_json(self) -> Any:
        """Convert back to plain JSON-compatible Python objects."""
        if self.kind == MetaKind.LIST:
            return [item.to_json() for item in self.value]
        if self.kind == MetaKind.MAP:
            return {key: val.to_json() for key, val in self.value.items()}
        return self.value

    def __bool__(self) -> bool:
        if self.kind == MetaKind.NULL:
            return False
        if self.kind in (MetaKind.LIST, MetaKind.MAP, MetaKind.STRING):
            return len(self.value) > 0
        return True


NULL = MetaValue(MetaKind.NULL, None)
