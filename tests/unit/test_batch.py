"""tests/unit/test_batch.py"""

from datetime import datetime, timezone

import pydantic
import pytest

from clx_xms.exceptions import EncodingError, ValidationError
from clx_xms.presence import Presence
from clx_xms.protocol import (
    BatchType,
    DeliveryReport,
    MtBinarySmsBatchCreate,
    MtBinarySmsBatchUpdate,
    MtTextSmsBatchCreate,
    MtTextSmsBatchUpdate,
)
from clx_xms.serialize.batch import (
    KNOWN_DELIVERY_REPORTS,
    check_delivery_report,
    encode_binary_batch,
    encode_binary_batch_update,
    encode_text_batch,
    encode_text_batch_update,
)


def make_text_batch(**kwargs):
    fields = {
        "sender": "12345",
        "recipients": ["987654321", "123456789"],
        "body": "Hello!",
    }
    fields.update(kwargs)
    return MtTextSmsBatchCreate(**fields)


def make_binary_batch(**kwargs):
    fields = {
        "sender": "12345",
        "recipients": ["987654321", "123456789"],
        "body": b"\x00\x01\x02\x03",
    }
    fields.update(kwargs)
    return MtBinarySmsBatchCreate(**fields)


def test_text_batch_everything():
    """Text batch with every field set, built field by field."""
    batch = MtTextSmsBatchCreate()
    batch.sender = "12345"
    batch.recipients = ["987654321", "123456789"]
    batch.body = "Hello, ${name}!"
    batch.parameters = {
        "name": {"987654321": "Mary", "123456789": "Joe", "default": "you"}
    }
    batch.delivery_report = DeliveryReport.NONE
    batch.send_at = datetime.fromisoformat("2016-12-01T11:03:13.192Z")
    batch.expire_at = datetime.fromisoformat("2016-12-04T11:03:13.192Z")
    batch.callback_url = "http://localhost/callback"

    assert encode_text_batch(batch) == {
        "body": "Hello, ${name}!",
        "delivery_report": "none",
        "send_at": "2016-12-01T11:03:13+00:00",
        "expire_at": "2016-12-04T11:03:13+00:00",
        "from": "12345",
        "to": ["987654321", "123456789"],
        "parameters": {
            "name": {"987654321": "Mary", "123456789": "Joe", "default": "you"}
        },
        "callback_url": "http://localhost/callback",
        "type": "mt_text",
    }


def test_text_batch_minimal():
    """Optional fields left unset are omitted."""
    assert encode_text_batch(make_text_batch()) == {
        "from": "12345",
        "to": ["987654321", "123456789"],
        "type": "mt_text",
        "body": "Hello!",
    }


def test_text_batch_key_order():
    """Keys are written in a stable order, common fields first."""
    batch = make_text_batch(
        delivery_report="full",
        callback_url="http://localhost/callback",
        parameters={"name": {"default": "you"}},
    )
    assert list(encode_text_batch(batch)) == [
        "from",
        "to",
        "delivery_report",
        "callback_url",
        "type",
        "body",
        "parameters",
    ]


def test_text_batch_tags():
    """Tags are written for text batches as well."""
    fields = encode_text_batch(make_text_batch(tags=["a", "b", "a"]))
    assert fields["tags"] == ["a", "b", "a"]


def test_binary_batch_everything():
    """Binary batch with base64 body, hex udh and non ASCII tags."""
    batch = MtBinarySmsBatchCreate()
    batch.sender = "12345"
    batch.recipients = ["987654321", "123456789"]
    batch.body = b"\x00\x01\x02\x03"
    batch.udh = b"\xff\xfe\xfd"
    batch.delivery_report = DeliveryReport.SUMMARY
    batch.expire_at = datetime.fromisoformat("2016-12-17T08:15:29.969Z")
    batch.tags = ["tag1", "таг2"]

    assert encode_binary_batch(batch) == {
        "body": "AAECAw==",
        "delivery_report": "summary",
        "expire_at": "2016-12-17T08:15:29+00:00",
        "from": "12345",
        "tags": ["tag1", "таг2"],
        "to": ["987654321", "123456789"],
        "type": "mt_binary",
        "udh": "fffefd",
    }


def test_binary_batch_without_udh():
    """The udh key is only written when set."""
    fields = encode_binary_batch(make_binary_batch())
    assert "udh" not in fields
    assert fields["body"] == "AAECAw=="


def test_binary_batch_rejects_text_body():
    """Binary bodies must be bytes, strings are not encoded implicitly."""
    batch = make_binary_batch()
    with pytest.raises(pydantic.ValidationError):
        batch.body = "text"


def test_batch_type_is_not_settable():
    """The type discriminator comes from the request class."""
    batch = make_text_batch()
    assert batch.batch_type == BatchType.MT_TEXT
    assert make_binary_batch().batch_type == BatchType.MT_BINARY
    with pytest.raises(AttributeError):
        batch.batch_type = BatchType.MT_BINARY


@pytest.mark.parametrize("sender", [None, ""])
def test_missing_sender(sender):
    """A batch without a sender is rejected."""
    with pytest.raises(ValidationError):
        encode_text_batch(make_text_batch(sender=sender))


def test_missing_recipients():
    """A batch without recipients is rejected."""
    with pytest.raises(ValidationError):
        encode_binary_batch(make_binary_batch(recipients=[]))


def test_missing_body():
    """A batch without a body is rejected."""
    with pytest.raises(ValidationError):
        encode_text_batch(make_text_batch(body=None))
    with pytest.raises(ValidationError):
        encode_binary_batch(make_binary_batch(body=None))


def test_empty_text_body_is_allowed():
    """An empty string is still a body."""
    assert encode_text_batch(make_text_batch(body=""))["body"] == ""


def test_unrecognized_delivery_report():
    """Delivery reports outside the recognized set are rejected."""
    with pytest.raises(ValidationError):
        encode_text_batch(make_text_batch(delivery_report="sometimes"))


def test_restricted_delivery_reports():
    """The recognized delivery reports can be narrowed."""
    batch = make_text_batch(delivery_report=DeliveryReport.PER_RECIPIENT)
    assert encode_text_batch(batch)["delivery_report"] == "per_recipient"
    with pytest.raises(ValidationError):
        encode_text_batch(batch, delivery_reports={"none", "summary"})


@pytest.mark.parametrize("report", list(DeliveryReport))
def test_check_delivery_report_known(report):
    """Every DeliveryReport member is recognized by default."""
    assert check_delivery_report(report, KNOWN_DELIVERY_REPORTS) == report.value


def test_bad_timestamp_is_encoding_error():
    """An unrepresentable timestamp aborts the whole batch."""
    batch = make_text_batch()
    batch.send_at = datetime(1, 1, 1, tzinfo=timezone.max)
    with pytest.raises(EncodingError):
        encode_text_batch(batch)


def test_text_batch_update_empty():
    """An update with nothing set only carries its type."""
    assert encode_text_batch_update(MtTextSmsBatchUpdate()) == {"type": "mt_text"}
    assert encode_binary_batch_update(MtBinarySmsBatchUpdate()) == {"type": "mt_binary"}


def test_text_batch_update_everything(send_at):
    """Text batch update with every field set."""
    update = MtTextSmsBatchUpdate()
    update.recipient_insertions = ["123"]
    update.recipient_removals = ["456", "789"]
    update.sender = "12345"
    update.delivery_report = DeliveryReport.FULL
    update.send_at = send_at
    update.expire_at = send_at
    update.callback_url = "http://localhost/callback"
    update.body = "new body"
    update.parameters = {"name": {"default": "you"}}

    assert encode_text_batch_update(update) == {
        "to_add": ["123"],
        "to_remove": ["456", "789"],
        "from": "12345",
        "delivery_report": "full",
        "send_at": "2016-12-01T11:03:13+00:00",
        "expire_at": "2016-12-01T11:03:13+00:00",
        "callback_url": "http://localhost/callback",
        "type": "mt_text",
        "body": "new body",
        "parameters": {"name": {"default": "you"}},
    }


def test_binary_batch_update_values():
    """Binary update fields are base64 and hex encoded."""
    update = MtBinarySmsBatchUpdate(body=b"\x00\x01\x02\x03", udh=b"\xff\xfe\xfd")
    assert encode_binary_batch_update(update) == {
        "type": "mt_binary",
        "body": "AAECAw==",
        "udh": "fffefd",
    }


def test_batch_update_resets():
    """Reset fields are written as null."""
    update = MtTextSmsBatchUpdate()
    update.delivery_report = Presence.reset()
    update.send_at = Presence.reset()
    update.expire_at = Presence.reset()
    update.callback_url = Presence.reset()
    update.parameters = Presence.reset()

    assert encode_text_batch_update(update) == {
        "delivery_report": None,
        "send_at": None,
        "expire_at": None,
        "callback_url": None,
        "type": "mt_text",
        "parameters": None,
    }


def test_binary_batch_update_reset_udh():
    """A reset udh is null rather than hex encoded."""
    update = MtBinarySmsBatchUpdate(udh=Presence.reset())
    assert encode_binary_batch_update(update) == {"type": "mt_binary", "udh": None}


def test_batch_update_unrecognized_delivery_report():
    """Delivery reports set on an update are checked too."""
    update = MtTextSmsBatchUpdate(delivery_report="always")
    with pytest.raises(ValidationError):
        encode_text_batch_update(update)
