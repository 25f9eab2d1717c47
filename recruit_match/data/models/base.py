"""
Base model classes for Recruit Match data models.

Provides common fields and configuration shared across all models.
"""

from typing import Annotated, Any, Optional

from bson import ObjectId
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationInfo


def coerce_document_id(value: Any) -> Any:
    """Convert MongoDB ObjectIds to their string form."""
    if isinstance(value, ObjectId):
        return str(value)
    return value


# Records may come from MongoDB (ObjectId) or from JSON (plain strings)
DocumentId = Annotated[str, BeforeValidator(coerce_document_id)]


def to_query_id(id_value: str) -> ObjectId | str:
    """Convert a string id to an ObjectId when it is a valid one."""
    if isinstance(id_value, str) and ObjectId.is_valid(id_value):
        return ObjectId(id_value)
    return id_value


class BaseDocument(BaseModel):
    """
    Base document model for MongoDB collections.

    Provides the id field and configuration for all stored records.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=False,
    )

    id: Optional[DocumentId] = Field(default=None, alias="_id")

    @classmethod
    def default_if_null(cls, value: Any, info: ValidationInfo) -> Any:
        """Replace an explicit null with the field's declared default."""
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class EmbeddedModel(BaseModel):
    """
    Base model for embedded documents (subdocuments).

    Use this for models that are embedded within other documents
    rather than stored in their own collection.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=False,
    )
