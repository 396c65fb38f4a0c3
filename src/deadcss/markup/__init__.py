from deadcss.markup.base import UsageExtractor
from deadcss.markup.decorator import (
    DecoratorUsageExtractor,
    find_components,
    resolve_template_path,
)
from deadcss.markup.jsx import JsxUsageExtractor, class_names
from deadcss.markup.template import scan_template

__all__ = [
    "UsageExtractor",
    "JsxUsageExtractor",
    "DecoratorUsageExtractor",
    "class_names",
    "find_components",
    "resolve_template_path",
    "scan_template",
]
