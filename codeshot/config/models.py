from pydantic import BaseModel, Field
from typing import Literal


class RegistryConfig(BaseModel):
    provider: Literal["pygments", "static"] = "pygments"
    catalog: str | None = None


class PresetsConfig(BaseModel):
    directory: str = ".codeshot/presets"
    default_format: Literal["yaml", "json"] = "yaml"


class CodeshotConfig(BaseModel):
    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    presets: PresetsConfig = Field(default_factory=PresetsConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
