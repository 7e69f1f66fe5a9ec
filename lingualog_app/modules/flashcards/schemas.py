from typing import Optional

from marshmallow import Schema, fields
from pydantic import BaseModel, ConfigDict, Field

from lingualog_app.modules.items.schemas import LearningItemSchema
from lingualog_app.modules.shared.utils.serialization import UTCDateTime


class FlashcardSessionCreateRequest(BaseModel):
    model_config = ConfigDict(extra='ignore')

    user_id: int = Field(gt=0)
    item_id: int = Field(gt=0)
    language_id: Optional[int] = Field(default=None, gt=0)
    was_correct: bool


class FlashcardSessionSchema(Schema):
    id = fields.Int()
    user_id = fields.Int()
    language_id = fields.Int()
    item_id = fields.Int()
    was_correct = fields.Bool()
    shown_at = UTCDateTime()


class FlashcardItemSchema(LearningItemSchema):
    """A learning item plus review statistics derived from its sessions."""
    last_reviewed = UTCDateTime(allow_none=True)
    review_count = fields.Int()
    correct_count = fields.Int()


flashcard_session_schema = FlashcardSessionSchema()
flashcard_sessions_schema = FlashcardSessionSchema(many=True)
flashcard_items_schema = FlashcardItemSchema(many=True)
