from __future__ import annotations

from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


VersionValue = Union[bool, str, None]


class SupportEntry(BaseModel):
    """
    One support data point for a runtime.

    Accepts the boolean shorthand: true -> always supported, false -> never.
    """

    model_config = ConfigDict(frozen=True)

    version_added: VersionValue = None
    version_removed: VersionValue = None

    prefix: Optional[str] = None
    alternative_name: Optional[str] = None
    partial_implementation: bool = False
    flags: List[Dict[str, Any]] = Field(default_factory=list)
    notes: List[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _expand_shorthand(cls, value: Any) -> Any:
        if isinstance(value, bool):
            return {"version_added": value}
        return value

    @field_validator("notes", mode="before")
    @classmethod
    def _notes_as_list(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    @property
    def is_added(self) -> bool:
        return bool(self.version_added)

    @property
    def removal_version(self) -> Optional[str]:
        # booleans and blanks are not machine-checkable removals
        v = self.version_removed
        if isinstance(v, bool) or not v:
            return None
        return v


class StatusBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    experimental: Optional[bool] = None
    standard_track: Optional[bool] = None
    deprecated: Optional[bool] = None


class FeatureRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    description: Optional[str] = None
    mdn_url: Optional[str] = None
    spec_url: List[str] = Field(default_factory=list)
    status: Optional[StatusBlock] = None

    # None => no support block at all (nothing to check)
    support: Optional[Dict[str, List[SupportEntry]]] = None

    @field_validator("spec_url", mode="before")
    @classmethod
    def _spec_url_as_list(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("support", mode="before")
    @classmethod
    def _support_as_lists(cls, value: Any) -> Any:
        if not isinstance(value, Mapping):
            return value
        return {k: (list(v) if isinstance(v, (list, tuple)) else [v]) for k, v in value.items()}

    @classmethod
    def coerce(cls, data: Any) -> "FeatureRecord":
        """Accept a FeatureRecord, a raw mapping, or a raw `{"__compat": {...}}` node."""
        if isinstance(data, cls):
            return data
        if isinstance(data, Mapping) and "__compat" in data:
            data = data["__compat"]
        return cls.model_validate(data)

    @property
    def is_abandoned(self) -> bool:
        return self.status is not None and self.status.standard_track is False

    def iter_support(self, *, skip: Tuple[str, ...] = ()) -> Iterator[Tuple[str, SupportEntry]]:
        for runtime, entries in (self.support or {}).items():
            if runtime in skip:
                continue
            for entry in entries:
                yield runtime, entry
