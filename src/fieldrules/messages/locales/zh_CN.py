"""Simplified Chinese validation messages (the base locale)."""

from __future__ import annotations

_MESSAGE_DATA: dict[str, str] = {
    "default": "验证失败",
    "required": "请填写{label}",
    "enum": "{label}不在允许范围内",
    "regex": "{label}格式不正确",
    "type": "{label}类型错误",
    "confirm": "{label}与{confirm_label}不一致，请重新输入",
    "confirm_not_found": "{confirm_label}字段不存在！",
    "pwd": "{label}须为6–18位，且不能全是字母、数字或特殊字符(!@#$%^&_.*?)",
    "weak_pwd": "{label}仅限字母、数字或特殊字符(!@#$%^&_.*?)，长度6–18位",
    "strong_pwd": "{label}至少8位，需含大写字母、小写字母、数字及特殊字符(!@#$%^&_.*?)各1个",
    "min": "{label}不得小于{min}",
    "max": "{label}不得大于{max}",
    "between": "{label}必须在{min}至{max}之间",
    "min_length": "{label}长度不能少于{min_length}",
    "max_length": "{label}长度不能超过{max_length}",
    "range_length": "{label}长度必须介于{min_length}和{max_length}之间",
    "minimum": "{label}不能小于{minimum}",
    "maximum": "{label}不能大于{maximum}",
    "range_number": "{label}必须介于{minimum}和{maximum}之间",
}
