from ..protocol.group import GroupAutoUpdate, GroupCreate, GroupUpdate
from .fields import encode_string_set, write_presence


def encode_auto_update(auto_update: GroupAutoUpdate) -> dict:
    add_first, add_second = auto_update.add_word_pair
    remove_first, remove_second = auto_update.remove_word_pair
    
    return {
        "to": auto_update.recipient,
        "add": {
            "first_word": add_first,
            "second_word": add_second
        },
        "remove": {
            "first_word": remove_first,
            "second_word": remove_second
        }
    }

def encode_group(group: GroupCreate) -> dict:
    fields = {}
    
    if group.name is not None:
        fields["name"] = group.name
    if group.members:
        fields["members"] = encode_string_set(group.members)
    if group.child_groups:
        fields["child_groups"] = encode_string_set(group.child_groups)
    if group.auto_update is not None:
        fields["auto_update"] = encode_auto_update(group.auto_update)
        
    return fields

def encode_group_update(update: GroupUpdate) -> dict:
    """Encodes a group update, an update with nothing set encodes to `{}`."""
    fields = {}
    
    write_presence(fields, "name", update.name)
    write_presence(fields, "add", update.member_insertions, encode_string_set)
    write_presence(fields, "remove", update.member_removals, encode_string_set)
    write_presence(fields, "child_groups_add", update.child_group_insertions, encode_string_set)
    write_presence(fields, "child_groups_remove", update.child_group_removals, encode_string_set)
    write_presence(fields, "add_from_group", update.add_from_group)
    write_presence(fields, "remove_from_group", update.remove_from_group)
    write_presence(fields, "auto_update", update.auto_update, encode_auto_update)
    
    return fields
