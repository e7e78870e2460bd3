"""English (US) validation messages.

Templates are stored in ``_MESSAGE_DATA`` and read by
``PackageLocaleBackend``.  Placeholders name rule fields (``{label}``,
``{min}``, ``{confirm_label}``, ...).
"""

from __future__ import annotations

_MESSAGE_DATA: dict[str, str] = {
    "default": "Validation failed",
    "required": "Please fill in {label}",
    "enum": "{label} is not within the allowed range",
    "regex": "{label} format is incorrect",
    "type": "{label} type error",
    "confirm": "{label} does not match {confirm_label}, please re-enter",
    "confirm_not_found": "{confirm_label} field not found!",
    "pwd": (
        "{label} must be 6–18 characters and cannot be all letters, numbers, "
        "or special characters (!@#$%^&_.*?)"
    ),
    "weak_pwd": (
        "{label} can only contain letters, numbers, or special characters (!@#$%^&_.*?), "
        "length 6–18 characters"
    ),
    "strong_pwd": (
        "{label} must be at least 8 characters and include at least one uppercase letter, "
        "one lowercase letter, one number, and one special character (!@#$%^&_.*?)"
    ),
    "min": "{label} must not be less than {min}",
    "max": "{label} must not be greater than {max}",
    "between": "{label} must be between {min} and {max}",
    "min_length": "{label} must be at least {min_length} characters long",
    "max_length": "{label} must not exceed {max_length} characters",
    "range_length": "{label} length must be between {min_length} and {max_length}",
    "minimum": "{label} must not be less than {minimum}",
    "maximum": "{label} must not be greater than {maximum}",
    "range_number": "{label} must be between {minimum} and {maximum}",
}
