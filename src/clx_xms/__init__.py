"""Request serialization for the XMS messaging REST API.

Builds the JSON bodies for batch, group and tag requests::

    from clx_xms import Serializer, MtTextSmsBatchCreate, DeliveryReport

    batch = MtTextSmsBatchCreate(
        sender="12345",
        recipients=["987654321"],
        body="Hello!",
        delivery_report=DeliveryReport.SUMMARY
    )
    payload = Serializer().text_batch(batch)
"""

from .config import SerializerConfig
from .exceptions import (
    XmsError,
    SerializationError,
    ValidationError,
    EncodingError,
    InvalidStateError
)
from .presence import Presence, PresenceState, ABSENT, RESET
from .protocol import (
    MtTextSmsBatchCreate,
    MtBinarySmsBatchCreate,
    MtTextSmsBatchUpdate,
    MtBinarySmsBatchUpdate,
    GroupAutoUpdate,
    GroupCreate,
    GroupUpdate,
    Tags,
    TagsUpdate,
    DeliveryReport,
    BatchType
)
from .serialize import Serializer
