"""Pydantic models for the JSON documents exchanged with AppChains."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class JobParameter(_WireModel):
    name: str = Field(alias="Name")
    value: Any = Field(alias="Value")


class AppStartRequest(_WireModel):
    app_code: str = Field(alias="AppCode")
    pars: list[JobParameter] = Field(default_factory=list, alias="Pars")

    @classmethod
    def for_data_source(cls, app_code: str, data_source_id: str) -> "AppStartRequest":
        return cls(app_code=app_code, pars=[JobParameter(name="dataSourceId", value=data_source_id)])

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class JobStatusPayload(_WireModel):
    status: str = Field(alias="Status")
    completed_successfully: bool | None = Field(default=None, alias="CompletedSuccesfully")


class ResultPropPayload(_WireModel):
    name: str | None = Field(default=None, alias="Name")
    type: str | None = Field(default=None, alias="Type")
    value: str | None = Field(default=None, alias="Value")

    @field_validator("name", "type", "value", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> Any:
        # objects and lists become None so the property is dropped, not rejected
        if isinstance(value, str):
            return value
        if isinstance(value, (bool, int, float)):
            return str(value)
        return None


class AppResultsPayload(_WireModel):
    status: JobStatusPayload = Field(alias="Status")
    result_props: list[ResultPropPayload] = Field(default_factory=list, alias="ResultProps")

    @field_validator("result_props", mode="before")
    @classmethod
    def _default_props(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            return [item if isinstance(item, dict) else {} for item in value]
        return value


__all__ = [
    "AppResultsPayload",
    "AppStartRequest",
    "JobParameter",
    "JobStatusPayload",
    "ResultPropPayload",
]
