"""Airport record schema."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

if TYPE_CHECKING:
    from collections.abc import Mapping


class AirportRecord(BaseModel):
    """Single airport with search-ready lowercase mirrors.

    Serialized as ``{"icao": ..., "name": ...}``; the mirrors never leave
    the process.
    """

    model_config = ConfigDict(frozen=True, serialize_by_alias=True)

    code: str = Field(
        validation_alias=AliasChoices("code", "icao"),
        serialization_alias="icao",
        description="ICAO identifier",
    )
    name: str

    # Derived from code/name whenever a record is built or copied.
    code_lower: str = Field(default="", exclude=True, repr=False)
    name_lower: str = Field(default="", exclude=True, repr=False)

    @model_validator(mode="before")
    @classmethod
    def _fold_case(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        folded = dict(data)
        code = folded.get("code", folded.get("icao"))
        name = folded.get("name")
        if isinstance(code, str):
            folded["code_lower"] = code.lower()
        if isinstance(name, str):
            folded["name_lower"] = name.lower()
        return folded

    def model_copy(
        self, *, update: Mapping[str, Any] | None = None, deep: bool = False
    ) -> AirportRecord:
        """Copy the record, re-deriving the mirrors from any updated fields."""
        if update:
            update = {
                key: value
                for key, value in update.items()
                if key not in ("code_lower", "name_lower")
            }
            if isinstance(update.get("code"), str):
                update["code_lower"] = update["code"].lower()
            if isinstance(update.get("name"), str):
                update["name_lower"] = update["name"].lower()
        return super().model_copy(update=update, deep=deep)

    @classmethod
    def from_row(cls, code: str, name: str) -> AirportRecord:
        """Build a record from a raw ``(code, name)`` pair."""
        return cls(code=code, name=name)
