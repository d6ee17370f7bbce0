"""Core data models shared across wfcdocs components."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

Number = Union[int, float]


@dataclass(frozen=True)
class InterfaceEntry:
    """A callable method recovered from the SDK client source."""

    name: str
    params: List[str] = field(default_factory=list)
    jsdoc: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": self.name, "params": list(self.params)}
        if self.jsdoc is not None:
            data["jsdoc"] = self.jsdoc
        return data


@dataclass(frozen=True)
class EventEntry:
    """A symbolic event name and its string value."""

    name: str
    value: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "value": self.value}


@dataclass(frozen=True)
class EnumEntry:
    """Numeric constant from the message content type file."""

    enum_name: str
    value: Number
    jsdoc: Optional[str] = None


@dataclass(frozen=True)
class FlagEntry:
    """Numeric constant from the persist flag file."""

    name: str
    value: Number
    jsdoc: Optional[str] = None


@dataclass(frozen=True)
class ClassMetaEntry:
    """Default-exported class declaration found in a message definition file."""

    file_path: str
    class_name: str
    base_class: Optional[str] = None
    jsdoc: Optional[str] = None


@dataclass(frozen=True)
class MessageConfigEntry:
    """Registration tuple from the message configuration, references unresolved."""

    name: str
    flag: str
    type_enum: str
    content_clazz: str


@dataclass(frozen=True)
class MessageTypeInfo:
    """Fully joined message type record."""

    name: str
    flag: str
    type_enum: str
    content_clazz: str
    flag_value: Optional[Number] = None
    flag_description: Optional[str] = None
    type_value: Optional[Number] = None
    type_description: Optional[str] = None
    class_file: Optional[str] = None
    extends: Optional[str] = None
    jsdoc: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "flag": self.flag,
            "flagValue": self.flag_value,
            "flagDescription": self.flag_description,
            "typeEnum": self.type_enum,
            "typeValue": self.type_value,
            "typeDescription": self.type_description,
            "contentClazz": self.content_clazz,
            "classFile": self.class_file,
            "extends": self.extends,
            "jsdoc": self.jsdoc,
        }
