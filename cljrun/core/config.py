from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class RuntimeConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CLJRUN_", case_sensitive=False)

    log_level: str = "info"
    log_format: str = "text"
    java_executable: str = "java"
    vm_args: str = ""

    # Property-style fallbacks, used only when nothing else sets the value.
    script: str | None = None
    main_class: str | None = None
    args: str | None = None

    def vm_arg_list(self) -> list[str]:
        return self.vm_args.split()


@lru_cache
def get_runtime_config() -> RuntimeConfig:
    return RuntimeConfig()
