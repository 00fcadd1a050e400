from collections.abc import Iterable
from .fields import encode_string_set


def encode_tags(tags: Iterable[str]) -> dict:
    return {"tags": encode_string_set(tags)}

def encode_tags_update(to_add: Iterable[str], to_remove: Iterable[str]) -> dict:
    """Both keys are always written, an empty side is sent as `[]`."""
    return {
        "add": encode_string_set(to_add),
        "remove": encode_string_set(to_remove)
    }
