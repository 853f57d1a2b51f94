"""Value tree and consumer views."""

from yamlipy.value.model import (
    FALSE,
    NULL,
    SCALAR_TYPES,
    TRUE,
    VALUE_TYPES,
    YamlArray,
    YamlBool,
    YamlDouble,
    YamlInt,
    YamlMap,
    YamlNull,
    YamlScalar,
    YamlString,
    YamlValue,
    to_value,
)
from yamlipy.value.views import YamlView, view

__all__ = [
    "FALSE",
    "NULL",
    "SCALAR_TYPES",
    "TRUE",
    "VALUE_TYPES",
    "YamlArray",
    "YamlBool",
    "YamlDouble",
    "YamlInt",
    "YamlMap",
    "YamlNull",
    "YamlScalar",
    "YamlString",
    "YamlValue",
    "YamlView",
    "to_value",
    "view",
]
