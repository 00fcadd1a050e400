from .batch import (
    MtBatchSmsCreate,
    MtTextSmsBatchCreate,
    MtBinarySmsBatchCreate,
    MtBatchSmsUpdate,
    MtTextSmsBatchUpdate,
    MtBinarySmsBatchUpdate,
    BatchCreate,
    BatchUpdate
)
from .consts import BatchType, TEXT_PARAMETER_DEFAULT
from .group import GroupAutoUpdate, GroupCreate, GroupUpdate
from .report import DeliveryReport
from .tags import Tags, TagsUpdate


type RequestModels = BatchCreate | BatchUpdate | GroupCreate | GroupUpdate | Tags | TagsUpdate
