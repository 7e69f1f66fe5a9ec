from marshmallow import Schema, fields
from pydantic import BaseModel, ConfigDict, Field, field_validator

from lingualog_app.modules.shared.utils.serialization import UTCDateTime


class LanguageCreateRequest(BaseModel):
    model_config = ConfigDict(extra='ignore')

    user_id: int = Field(gt=0)
    language_code: str = Field(max_length=16)
    language_name: str = Field(max_length=100)

    @field_validator('language_code', 'language_name', mode='before')
    @classmethod
    def strip_and_require(cls, value):
        if isinstance(value, str):
            value = value.strip()
        if not value:
            raise ValueError('must not be blank')
        return value


class LanguageSchema(Schema):
    id = fields.Int()
    user_id = fields.Int()
    language_code = fields.Str()
    language_name = fields.Str()
    created_at = UTCDateTime()


language_schema = LanguageSchema()
languages_schema = LanguageSchema(many=True)
