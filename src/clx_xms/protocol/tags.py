from pydantic import BaseModel, ConfigDict


class Tags(BaseModel):
    model_config = ConfigDict(validate_assignment=True)
    
    tags: list[str] = []

class TagsUpdate(BaseModel):
    model_config = ConfigDict(validate_assignment=True)
    
    tags_to_add: list[str] = []
    tags_to_remove: list[str] = []
