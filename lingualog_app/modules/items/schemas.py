from typing import Optional

from marshmallow import Schema, fields
from pydantic import BaseModel, ConfigDict, Field, field_validator

from lingualog_app.modules.shared.utils.serialization import UTCDateTime
from .models import ItemType


class LearningItemCreateRequest(BaseModel):
    model_config = ConfigDict(extra='ignore', populate_by_name=True)

    user_id: int = Field(gt=0)
    language_id: int = Field(gt=0)
    item_type: ItemType = Field(alias='type')
    content: str
    translation: Optional[str] = None
    meaning: Optional[str] = None
    pronunciation: Optional[str] = None
    audio_data: Optional[str] = None
    example_usage: Optional[str] = None
    notes: Optional[str] = None

    @field_validator('content')
    @classmethod
    def content_not_blank(cls, value):
        if not value.strip():
            raise ValueError('must not be blank')
        return value

    @field_validator('translation', 'meaning', 'pronunciation', 'audio_data', 'example_usage', 'notes')
    @classmethod
    def empty_to_none(cls, value):
        # Optional text arrives as '' from forms; store NULL instead.
        return value or None


class LearningItemSchema(Schema):
    id = fields.Int()
    user_id = fields.Int()
    language_id = fields.Int()
    type = fields.Str(attribute='item_type')
    content = fields.Str()
    translation = fields.Str(allow_none=True)
    meaning = fields.Str(allow_none=True)
    pronunciation = fields.Str(allow_none=True)
    audio_data = fields.Str(allow_none=True)
    example_usage = fields.Str(allow_none=True)
    notes = fields.Str(allow_none=True)
    created_at = UTCDateTime()


learning_item_schema = LearningItemSchema()
learning_items_schema = LearningItemSchema(many=True)
