"""Localized fixed strings used by the page templates."""

from typing import Any

LABEL_SETS: dict[str, dict[str, str]] = {
    "zh": {
        "overview": "概述",
        "methods": "函数",
        "properties": "属性",
        "consts": "常量",
        "events": "事件",
        "method_name": "函数名称",
        "property_name": "属性名称",
        "const_name": "名称",
        "event_name": "事件名称",
        "name": "名称",
        "type": "类型",
        "description": "说明",
        "parameter": "参数",
        "return_value": "返回值",
        "method_suffix": "函数",
        "property_suffix": "属性",
        "type_line": "类型：",
        "feature": "特性",
        "supported": "是否支持",
        "readable": "可直接读取",
        "writable": "可直接修改",
        "persistent": "可持久化",
        "scriptable": "可脚本化",
        "design": "可在IDE中设置",
        "xml": "可在XML中设置",
        "get_prop": "支持通过widget_get_prop读取",
        "set_prop": "支持通过widget_set_prop修改",
        "static": "静态",
        "constructor": "构造函数",
        "cast": "类型转换",
        "custom": "自定义脚本绑定",
        "flags": "特性：",
        "string_enum": "枚举值为字符串。",
        "yes": "是",
        "no": "否",
    },
    "en": {
        "overview": "Overview",
        "methods": "Methods",
        "properties": "Properties",
        "consts": "Constants",
        "events": "Events",
        "method_name": "Method",
        "property_name": "Property",
        "const_name": "Name",
        "event_name": "Event",
        "name": "Name",
        "type": "Type",
        "description": "Description",
        "parameter": "Parameter",
        "return_value": "Return value",
        "method_suffix": "method",
        "property_suffix": "property",
        "type_line": "Type: ",
        "feature": "Feature",
        "supported": "Supported",
        "readable": "Directly readable",
        "writable": "Directly writable",
        "persistent": "Persistent",
        "scriptable": "Scriptable",
        "design": "Settable in IDE",
        "xml": "Settable in XML",
        "get_prop": "Readable via widget_get_prop",
        "set_prop": "Writable via widget_set_prop",
        "static": "static",
        "constructor": "constructor",
        "cast": "cast",
        "custom": "custom script binding",
        "flags": "Flags: ",
        "string_enum": "Enum values are strings.",
        "yes": "Yes",
        "no": "No",
    },
}


def resolve_labels(config: dict[str, Any]) -> dict[str, str]:
    """Pick the label set for ``config["locale"]`` and apply overrides."""
    locale = config.get("locale") or "zh"
    if locale not in LABEL_SETS:
        msg = f"Unknown locale {locale!r}; expected one of {sorted(LABEL_SETS)}"
        raise ValueError(msg)
    labels = dict(LABEL_SETS[locale])
    labels.update(config.get("labels") or {})
    return labels


def yes_no(flag: bool, labels: dict[str, str]) -> str:
    return labels["yes"] if flag else labels["no"]
