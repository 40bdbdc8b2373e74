"""Scanner states."""

from enum import Enum, auto


class ScannerState(Enum):
    WITHIN_CONTENT = auto()
    AFTER_OPENING_START_TAG = auto()
    AFTER_OPENING_END_TAG = auto()
    WITHIN_DOCTYPE = auto()
    WITHIN_TAG = auto()
    WITHIN_END_TAG = auto()
    WITHIN_COMMENT = auto()
    WITHIN_SCRIPT_CONTENT = auto()
    WITHIN_STYLE_CONTENT = auto()
    AFTER_ATTRIBUTE_NAME = auto()
    BEFORE_ATTRIBUTE_VALUE = auto()
