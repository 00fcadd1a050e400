import logging
from rich.logging import RichHandler
from clx_xms import (
    Serializer,
    GroupAutoUpdate,
    GroupCreate,
    GroupUpdate,
    Presence
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=[RichHandler()]
)

logging.getLogger("clx_xms").setLevel(logging.DEBUG)
logger = logging.getLogger(__name__)


serializer = Serializer()

group = GroupCreate(
    name="subscribers",
    members=["123456789", "987654321"],
    auto_update=GroupAutoUpdate(
        recipient="12345",
        add_word_pair=("JOIN", "NEWS"),
        remove_word_pair=("STOP", "NEWS")
    )
)
logger.info(serializer.group(group))

update = GroupUpdate()
update.member_removals = ["987654321"]
update.auto_update = Presence.reset()
logger.info(serializer.group_update(update))

logger.info(serializer.tags_update(["vip"], []))
