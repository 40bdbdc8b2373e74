"""Token classes produced by the markup scanner."""

from enum import Enum


class TokenType(Enum):
    START_COMMENT_TAG = "start_comment_tag"
    COMMENT = "comment"
    END_COMMENT_TAG = "end_comment_tag"
    START_TAG_OPEN = "start_tag_open"
    START_TAG = "start_tag"
    START_TAG_CLOSE = "start_tag_close"
    START_TAG_SELF_CLOSE = "start_tag_self_close"
    END_TAG_OPEN = "end_tag_open"
    END_TAG = "end_tag"
    END_TAG_CLOSE = "end_tag_close"
    DELIMITER_ASSIGN = "delimiter_assign"
    ATTRIBUTE_NAME = "attribute_name"
    ATTRIBUTE_VALUE = "attribute_value"
    START_DOCTYPE_TAG = "start_doctype_tag"
    DOCTYPE = "doctype"
    END_DOCTYPE_TAG = "end_doctype_tag"
    CONTENT = "content"
    WHITESPACE = "whitespace"
    UNKNOWN = "unknown"
    SCRIPT = "script"
    STYLES = "styles"
    EOS = "eos"
