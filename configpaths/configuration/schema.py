"""Pydantic models describing the configpaths settings file."""

from __future__ import annotations

from typing import Any, Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from configpaths.options import DEFAULT_CONFIG_DIRECTORY_NAME

PathFlavor = Literal["native", "posix", "windows"]


class MetaConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    version: str = "1.0"


class CLIConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    config_directory_name: str = Field(
        default=DEFAULT_CONFIG_DIRECTORY_NAME, min_length=1
    )
    file_names: List[str] = Field(default_factory=list)
    path_flavor: PathFlavor = "native"
    debug: bool = False

    @field_validator("config_directory_name")
    @classmethod
    def _single_component(cls, value: str) -> str:
        if "/" in value or "\\" in value:
            raise ValueError(
                f"config_directory_name must be a single path component: {value!r}"
            )
        return value

    @field_validator("file_names")
    @classmethod
    def _non_empty_names(cls, value: List[str]) -> List[str]:
        if any(not name for name in value):
            raise ValueError("file_names entries cannot be empty")
        return value


class ConfigPathsSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    meta: MetaConfig = Field(default_factory=MetaConfig)
    cli: CLIConfig = Field(default_factory=CLIConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConfigPathsSettings":
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
