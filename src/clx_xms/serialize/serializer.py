import logging
from collections.abc import Iterable
from pydantic_core import to_json
from ..config import SerializerConfig
from ..protocol.batch import (
    MtTextSmsBatchCreate,
    MtBinarySmsBatchCreate,
    MtTextSmsBatchUpdate,
    MtBinarySmsBatchUpdate
)
from ..protocol.group import GroupCreate, GroupUpdate
from ..protocol.tags import Tags, TagsUpdate
from ..protocol import RequestModels
from .batch import (
    encode_text_batch,
    encode_binary_batch,
    encode_text_batch_update,
    encode_binary_batch_update
)
from .group import encode_group, encode_group_update
from .tags import encode_tags, encode_tags_update


logger = logging.getLogger(__name__)


class Serializer:
    """Turns XMS request objects into JSON request bodies.
    
    Holds no state besides its config, a single instance can be shared between threads.
    """
    
    config: SerializerConfig
    
    def __init__(self, config: SerializerConfig | None = None):
        self.config = config or SerializerConfig()
        
    def _to_json(self, fields: dict) -> str:
        return to_json(fields, indent=self.config.indent).decode("utf-8")
    
    def text_batch(self, batch: MtTextSmsBatchCreate) -> str:
        fields = encode_text_batch(batch, self.config.delivery_reports)
        logger.debug(f"Serialized text batch to {len(batch.recipients)} recipient(s)")
        return self._to_json(fields)
    
    def binary_batch(self, batch: MtBinarySmsBatchCreate) -> str:
        fields = encode_binary_batch(batch, self.config.delivery_reports)
        logger.debug(f"Serialized binary batch to {len(batch.recipients)} recipient(s)")
        return self._to_json(fields)
    
    def text_batch_update(self, update: MtTextSmsBatchUpdate) -> str:
        fields = encode_text_batch_update(update, self.config.delivery_reports)
        logger.debug(f"Serialized text batch update with fields {list(fields)}")
        return self._to_json(fields)
    
    def binary_batch_update(self, update: MtBinarySmsBatchUpdate) -> str:
        fields = encode_binary_batch_update(update, self.config.delivery_reports)
        logger.debug(f"Serialized binary batch update with fields {list(fields)}")
        return self._to_json(fields)
    
    def group(self, group: GroupCreate) -> str:
        fields = encode_group(group)
        logger.debug(f"Serialized group {group.name!r} with {len(group.members)} member(s)")
        return self._to_json(fields)
    
    def group_update(self, update: GroupUpdate) -> str:
        fields = encode_group_update(update)
        logger.debug(f"Serialized group update with fields {list(fields)}")
        return self._to_json(fields)
    
    def tags(self, tags: Iterable[str]) -> str:
        fields = encode_tags(tags)
        logger.debug(f"Serialized {len(fields['tags'])} tag(s)")
        return self._to_json(fields)
    
    def tags_update(self, to_add: Iterable[str], to_remove: Iterable[str]) -> str:
        fields = encode_tags_update(to_add, to_remove)
        logger.debug(f"Serialized tags update, {len(fields['add'])} to add, {len(fields['remove'])} to remove")
        return self._to_json(fields)
    
    def serialize(self, request: RequestModels) -> str:
        """Serializes any supported request object by routing it to the matching method."""
        if isinstance(request, MtTextSmsBatchCreate):
            return self.text_batch(request)
        elif isinstance(request, MtBinarySmsBatchCreate):
            return self.binary_batch(request)
        elif isinstance(request, MtTextSmsBatchUpdate):
            return self.text_batch_update(request)
        elif isinstance(request, MtBinarySmsBatchUpdate):
            return self.binary_batch_update(request)
        elif isinstance(request, GroupCreate):
            return self.group(request)
        elif isinstance(request, GroupUpdate):
            return self.group_update(request)
        elif isinstance(request, Tags):
            return self.tags(request.tags)
        elif isinstance(request, TagsUpdate):
            return self.tags_update(request.tags_to_add, request.tags_to_remove)
        else:
            raise TypeError(f"Can't serialize {type(request).__name__}")
