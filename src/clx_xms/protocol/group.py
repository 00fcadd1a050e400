from pydantic import BaseModel, ConfigDict
from ..presence import Presence, ABSENT


class GroupAutoUpdate(BaseModel):
    """Keyword rule that adds or removes a recipient when they text a word pair to `recipient`."""
    
    model_config = ConfigDict(frozen=True)
    
    recipient: str
    add_word_pair: tuple[str, str]
    remove_word_pair: tuple[str, str]


class GroupCreate(BaseModel):
    model_config = ConfigDict(validate_assignment=True)
    
    name: str | None = None
    members: list[str] = []
    child_groups: list[str] = []
    auto_update: GroupAutoUpdate | None = None


class GroupUpdate(BaseModel):
    """Changes to an existing group, fields left absent are not touched."""
    
    model_config = ConfigDict(validate_assignment=True)
    
    name: Presence[str] = ABSENT
    member_insertions: Presence[list[str]] = ABSENT
    member_removals: Presence[list[str]] = ABSENT
    child_group_insertions: Presence[list[str]] = ABSENT
    child_group_removals: Presence[list[str]] = ABSENT
    add_from_group: Presence[str] = ABSENT
    remove_from_group: Presence[str] = ABSENT
    auto_update: Presence[GroupAutoUpdate] = ABSENT
