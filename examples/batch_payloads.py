import logging
from datetime import datetime, timedelta, timezone
from rich.logging import RichHandler
from clx_xms import (
    Serializer,
    SerializerConfig,
    MtTextSmsBatchCreate,
    MtBinarySmsBatchCreate,
    MtTextSmsBatchUpdate,
    DeliveryReport,
    Presence
)
from clx_xms.protocol import TEXT_PARAMETER_DEFAULT

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=[RichHandler()]
)

logging.getLogger("clx_xms").setLevel(logging.DEBUG)
logger = logging.getLogger(__name__)


serializer = Serializer(SerializerConfig.load_from_env())
send_at = datetime.now(timezone.utc) + timedelta(hours=1)

text_batch = MtTextSmsBatchCreate(
    sender="12345",
    recipients=["987654321", "123456789"],
    body="Hello, ${name}!",
    parameters={
        "name": {
            "987654321": "Mary",
            "123456789": "Joe",
            TEXT_PARAMETER_DEFAULT: "you"
        }
    },
    delivery_report=DeliveryReport.SUMMARY,
    send_at=send_at
)
logger.info(serializer.text_batch(text_batch))

binary_batch = MtBinarySmsBatchCreate(
    sender="12345",
    recipients=["987654321"],
    body=b"\x00\x01\x02\x03",
    udh=b"\xff\xfe\xfd",
    tags=["tag1", "таг2"]
)
logger.info(serializer.binary_batch(binary_batch))

# push the batch back a day and drop the callback
update = MtTextSmsBatchUpdate()
update.send_at = send_at + timedelta(days=1)
update.callback_url = Presence.reset()
logger.info(serializer.text_batch_update(update))
