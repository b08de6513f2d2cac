"""Shared building blocks for FinCEN XML elements: errors, value checks and XML mapping.

Elements are dataclasses deriving from :class:`Element`. Each field that maps to
XML carries ``metadata`` with these keys:

``tag``
    XML name of the attribute or child element (required for mapped fields).
``attr``
    ``True`` when the field is an attribute of the element.
``element``
    The :class:`Element` subclass of a nested child element.
``many``
    ``True`` when the field is a list of repeated child elements.
``type``
    ``int`` for integer text values; text is kept as ``str`` otherwise.
``omitempty``
    ``True`` when an empty plain value ("" or 0) is left out of the output.
``check``
    A callable run on the value during validation; it raises on bad values.

A field whose default is ``None`` is optional: it is left out of the output
while ``None`` and written, even when empty, once it holds a value.
"""

from __future__ import annotations

import dataclasses
import xml.etree.ElementTree as ET
from datetime import datetime
from typing import Any, ClassVar, Iterable

FORM_8300 = "8300X"
REPORT_112 = "CTRX"

INDICATE_LEGAL_NAME = "L"
INDICATE_KNOWN_AS = "AKA"
INDICATE_DOING_BUSINESS = "DBA"

_INDICATOR_VALUES = ("Y", "")


class FincenError(ValueError):
    """Base class of validation errors; ``field`` names what failed."""

    template = "The {} is invalid"

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(self.template.format(field))


class FieldRequiredError(FincenError):
    """A required field is missing."""

    template = "The {} is a required field"


class MinMaxRangeError(FincenError):
    """A repeated field occurs too few or too many times."""

    template = "The {} has invalid min & max range"


class ValueInvalidError(FincenError):
    """A field holds a value outside its allowed set or format."""

    template = "The {} has invalid value"


class FieldOmittedError(FincenError):
    """A field is present where it must be left out."""

    template = "The {} should be omitted"


def check_involved(type_code: str, *args: str) -> bool:
    """Return whether ``type_code`` is one of ``args``."""
    return type_code in args


def validate_code(value: Any, allowed: Iterable[Any], name: str) -> Any:
    """Return ``value`` if it is one of ``allowed`` (same type), else raise."""
    if any(type(value) is type(item) and value == item for item in allowed):
        return value
    raise ValueInvalidError(name)


def validate_date(value: str) -> str:
    """Return ``value`` if it is a valid YYYYMMDD date, else raise."""
    if len(value) == 8 and value.isascii() and value.isdigit():
        try:
            datetime.strptime(value, "%Y%m%d")
        except ValueError:
            pass
        else:
            return value
    raise ValueInvalidError("DateYYYYMMDDType")


def validate_indicator(value: str) -> str:
    """Return ``value`` if it is a valid indicator ("Y" or blank), else raise."""
    return validate_code(value, _INDICATOR_VALUES, "IndicatorType")


def validate_indicator_null(value: str) -> str:
    """Return ``value`` if it is a valid nullable indicator ("Y" or blank), else raise."""
    return validate_code(value, _INDICATOR_VALUES, "IndicatorNullType")


def validate_restricted(value: str, max_length: int, name: str) -> str:
    """Return ``value`` if it is no longer than ``max_length``, else raise."""
    if len(value) > max_length:
        raise ValueInvalidError(name)
    return value


_ESCAPES = {
    '"': "&#34;",
    "'": "&#39;",
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    "\t": "&#x9;",
    "\n": "&#xA;",
    "\r": "&#xD;",
}


def _escape(text: str) -> str:
    return "".join(_ESCAPES.get(char, char) for char in text)


def _text(value: Any) -> str:
    return str(value)


def _convert(raw: str, meta: Any) -> Any:
    if meta.get("type") is int:
        stripped = raw.strip()
        return int(stripped) if stripped else 0
    return raw


def _is_empty(value: Any) -> bool:
    return value == "" or (isinstance(value, int) and value == 0)


@dataclasses.dataclass
class Element:
    """An XML element of a FinCEN report with a ``SeqNum`` attribute."""

    xml_tag: ClassVar[str] = ""

    seq_num: int = dataclasses.field(
        default=0, metadata={"tag": "SeqNum", "attr": True, "type": int}
    )

    @classmethod
    def _xml_fields(cls) -> list[dataclasses.Field]:
        return [f for f in dataclasses.fields(cls) if "tag" in f.metadata]

    def validate(self, *args: str) -> "Element":
        """Check every present field in order; nested elements get ``args``."""
        for f in self._xml_fields():
            value = getattr(self, f.name)
            if value is None:
                continue
            items = value if f.metadata.get("many") else [value]
            check = f.metadata.get("check")
            for item in items:
                if item is None:
                    continue
                if isinstance(item, Element):
                    item.validate(*args)
                elif check is not None:
                    check(item)
        return self

    def to_xml(self) -> str:
        """Serialise the element as tab-indented XML."""
        out: list[str] = []
        self._write(out, 0)
        return "".join(out)

    def _write(self, out: list[str], depth: int) -> None:
        attrs = []
        children = []
        for f in self._xml_fields():
            if f.metadata.get("attr"):
                value = getattr(self, f.name)
                if value is None or (f.metadata.get("omitempty") and _is_empty(value)):
                    continue
                attrs.append(f' {f.metadata["tag"]}="{_escape(_text(value))}"')
            else:
                children.append(f)
        out.append(f"<{self.xml_tag}{''.join(attrs)}>")

        wrote_child = False
        for f in children:
            meta = f.metadata
            value = getattr(self, f.name)
            if value is None:
                continue
            items = value if meta.get("many") else [value]
            for item in items:
                if item is None:
                    continue
                if not isinstance(item, Element) and meta.get("omitempty") and _is_empty(item):
                    continue
                out.append("\n" + "\t" * (depth + 1))
                if isinstance(item, Element):
                    item._write(out, depth + 1)
                else:
                    tag = meta["tag"]
                    out.append(f"<{tag}>{_escape(_text(item))}</{tag}>")
                wrote_child = True
        if wrote_child:
            out.append("\n" + "\t" * depth)
        out.append(f"</{self.xml_tag}>")

    @classmethod
    def from_xml(cls, data: str | bytes) -> "Element":
        """Parse an element of this type from XML text."""
        root = ET.fromstring(data)
        if root.tag != cls.xml_tag:
            raise ValueError(
                f"expected element type <{cls.xml_tag}> but have <{root.tag}>"
            )
        return cls._from_node(root)

    @classmethod
    def _from_node(cls, node: ET.Element) -> "Element":
        fields = cls._xml_fields()
        kwargs: dict[str, Any] = {}
        by_tag = {}
        for f in fields:
            meta = f.metadata
            if meta.get("attr"):
                raw = node.get(meta["tag"])
                if raw is not None:
                    kwargs[f.name] = _convert(raw, meta)
            else:
                by_tag[meta["tag"]] = f
        for child in node:
            f = by_tag.get(child.tag)
            if f is None:
                continue
            meta = f.metadata
            element_type = meta.get("element")
            if element_type is not None:
                value = element_type._from_node(child)
            else:
                value = _convert(child.text or "", meta)
            if meta.get("many"):
                kwargs.setdefault(f.name, []).append(value)
            else:
                kwargs[f.name] = value
        return cls(**kwargs)