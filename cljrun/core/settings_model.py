from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RunSettings(BaseModel):
    """Run options as they appear in ``cljrun.json``."""

    model_config = ConfigDict(extra="forbid")

    script: str | None = None
    scripts: list[str] | None = None
    mainClass: str | None = None
    args: str | None = None
    sourceDirectories: list[str] | None = None
    outputDirectory: str | None = None
    classpathElements: list[str] = Field(default_factory=list)


class UserDefaults(BaseModel):
    model_config = ConfigDict(extra="allow")

    sourceDirectories: list[str] = Field(default_factory=lambda: ["src/main/clojure"])
    outputDirectory: str = "target/classes"
    classpathElements: list[str] = Field(default_factory=list)
