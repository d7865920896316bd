from pydantic import BaseModel, ConfigDict


class FrozenModel(BaseModel):
    """Immutable model for query results handed to the interfaces."""

    model_config = ConfigDict(frozen=True)


class RecordModel(BaseModel):
    """Base for newly created records.

    Attributes are snake_case; the stored form uses the camelCase aliases
    (``createdAt``) so exports stay compatible with earlier snapshots.
    """

    model_config = ConfigDict(populate_by_name=True)

    def to_record(self) -> dict:
        return self.model_dump(by_alias=True)


__all__ = ["FrozenModel", "RecordModel"]
