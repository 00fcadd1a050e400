from collections.abc import Collection
from functools import partial
from ..exceptions import ValidationError
from ..protocol.batch import (
    MtBatchSmsCreate,
    MtTextSmsBatchCreate,
    MtBinarySmsBatchCreate,
    MtBatchSmsUpdate,
    MtTextSmsBatchUpdate,
    MtBinarySmsBatchUpdate
)
from ..protocol.report import DeliveryReport
from .fields import (
    encode_bytes,
    encode_hex,
    encode_string_set,
    encode_timestamp,
    write_presence
)


KNOWN_DELIVERY_REPORTS = frozenset(report.value for report in DeliveryReport)


def check_delivery_report(report: str, recognized: Collection[str]) -> str:
    """Returns the wire value of a delivery report, raises `ValidationError` if it isn't recognized."""
    wire_value = str(report)
    if wire_value not in recognized:
        raise ValidationError(
            f"Unrecognized delivery report {wire_value!r}, expected one of {sorted(recognized)}")
    return wire_value

def _encode_batch_create(
    batch: MtBatchSmsCreate, 
    delivery_reports: Collection[str]
) -> dict:
    if not batch.sender:
        raise ValidationError("Batch is missing a sender")
    if not batch.recipients:
        raise ValidationError("Batch needs at least one recipient")
    
    fields = {
        "from": batch.sender,
        "to": encode_string_set(batch.recipients)
    }
    
    if batch.delivery_report is not None:
        fields["delivery_report"] = check_delivery_report(
            batch.delivery_report, delivery_reports)
    if batch.send_at is not None:
        fields["send_at"] = encode_timestamp(batch.send_at)
    if batch.expire_at is not None:
        fields["expire_at"] = encode_timestamp(batch.expire_at)
    if batch.callback_url is not None:
        fields["callback_url"] = batch.callback_url
    if batch.tags:
        fields["tags"] = encode_string_set(batch.tags)
        
    fields["type"] = batch.batch_type.value
    return fields

def encode_text_batch(
    batch: MtTextSmsBatchCreate, 
    delivery_reports: Collection[str] = KNOWN_DELIVERY_REPORTS
) -> dict:
    fields = _encode_batch_create(batch, delivery_reports)
    
    if batch.body is None:
        raise ValidationError("Text batch is missing a body")
    fields["body"] = batch.body
    
    if batch.parameters:
        fields["parameters"] = {
            name: dict(substitutions) 
            for name, substitutions in batch.parameters.items()
        }
    
    return fields

def encode_binary_batch(
    batch: MtBinarySmsBatchCreate, 
    delivery_reports: Collection[str] = KNOWN_DELIVERY_REPORTS
) -> dict:
    fields = _encode_batch_create(batch, delivery_reports)
    
    if batch.body is None:
        raise ValidationError("Binary batch is missing a body")
    fields["body"] = encode_bytes(batch.body)
    
    if batch.udh is not None:
        fields["udh"] = encode_hex(batch.udh)
        
    return fields

def _encode_batch_update(
    update: MtBatchSmsUpdate, 
    delivery_reports: Collection[str]
) -> dict:
    fields = {}
    
    write_presence(fields, "to_add", update.recipient_insertions, encode_string_set)
    write_presence(fields, "to_remove", update.recipient_removals, encode_string_set)
    write_presence(fields, "from", update.sender)
    write_presence(fields, "delivery_report", update.delivery_report, 
        partial(check_delivery_report, recognized=delivery_reports))
    write_presence(fields, "send_at", update.send_at, encode_timestamp)
    write_presence(fields, "expire_at", update.expire_at, encode_timestamp)
    write_presence(fields, "callback_url", update.callback_url)
    
    fields["type"] = update.batch_type.value
    return fields

def encode_text_batch_update(
    update: MtTextSmsBatchUpdate, 
    delivery_reports: Collection[str] = KNOWN_DELIVERY_REPORTS
) -> dict:
    fields = _encode_batch_update(update, delivery_reports)
    write_presence(fields, "body", update.body)
    write_presence(fields, "parameters", update.parameters)
    return fields

def encode_binary_batch_update(
    update: MtBinarySmsBatchUpdate, 
    delivery_reports: Collection[str] = KNOWN_DELIVERY_REPORTS
) -> dict:
    fields = _encode_batch_update(update, delivery_reports)
    write_presence(fields, "body", update.body, encode_bytes)
    write_presence(fields, "udh", update.udh, encode_hex)
    return fields

