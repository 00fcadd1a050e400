"""Wire constants for XMS request payloads."""

from enum import StrEnum


class BatchType(StrEnum):
    MT_TEXT = "mt_text"
    MT_BINARY = "mt_binary"

TEXT_PARAMETER_DEFAULT = "default"
