"""Pydantic models for batch create and update requests in the XMS API."""

from datetime import datetime
from typing import ClassVar
from pydantic import BaseModel, ConfigDict, StrictBytes
from ..presence import Presence, ABSENT
from .consts import BatchType


# CREATE MODELS

class MtBatchSmsCreate(BaseModel):
    """Fields shared by text and binary batches.
    
    `delivery_report` takes a `DeliveryReport` member or its wire string, it is checked against the recognized set when serialized.
    """
    
    model_config = ConfigDict(validate_assignment=True)
    
    batch_type: ClassVar[BatchType]
    
    sender: str | None = None
    recipients: list[str] = []
    delivery_report: str | None = None
    send_at: datetime | None = None
    expire_at: datetime | None = None
    callback_url: str | None = None
    tags: list[str] = []

class MtTextSmsBatchCreate(MtBatchSmsCreate):
    """Text batch, `parameters` maps a variable name to per recipient (or `default`) substitutions."""
    
    batch_type: ClassVar[BatchType] = BatchType.MT_TEXT
    
    body: str | None = None
    parameters: dict[str, dict[str, str]] = {}

class MtBinarySmsBatchCreate(MtBatchSmsCreate):
    batch_type: ClassVar[BatchType] = BatchType.MT_BINARY
    
    body: StrictBytes | None = None
    udh: StrictBytes | None = None
    

# UPDATE MODELS

class MtBatchSmsUpdate(BaseModel):
    """Changes to a scheduled batch, fields left absent are not touched."""
    
    model_config = ConfigDict(validate_assignment=True)
    
    batch_type: ClassVar[BatchType]
    
    recipient_insertions: Presence[list[str]] = ABSENT
    recipient_removals: Presence[list[str]] = ABSENT
    sender: Presence[str] = ABSENT
    delivery_report: Presence[str] = ABSENT
    send_at: Presence[datetime] = ABSENT
    expire_at: Presence[datetime] = ABSENT
    callback_url: Presence[str] = ABSENT

class MtTextSmsBatchUpdate(MtBatchSmsUpdate):
    batch_type: ClassVar[BatchType] = BatchType.MT_TEXT
    
    body: Presence[str] = ABSENT
    parameters: Presence[dict[str, dict[str, str]]] = ABSENT

class MtBinarySmsBatchUpdate(MtBatchSmsUpdate):
    batch_type: ClassVar[BatchType] = BatchType.MT_BINARY
    
    body: Presence[StrictBytes] = ABSENT
    udh: Presence[StrictBytes] = ABSENT


# TYPES

type BatchCreate = MtTextSmsBatchCreate | MtBinarySmsBatchCreate
type BatchUpdate = MtTextSmsBatchUpdate | MtBinarySmsBatchUpdate
