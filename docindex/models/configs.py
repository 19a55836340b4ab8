from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class ContentConfig(BaseModel):
    content_dir: Path
    base: str | None = Field(default=None, description="Key prefix; defaults to the content directory name")
    pattern: str = "**/*.md"
    concurrency: int = Field(default=16, gt=0)

    def resolved_base(self) -> str:
        return self.base or self.content_dir.resolve().name

    def resolve_paths(self, base_path: Path) -> "ContentConfig":
        values = self.model_dump()
        raw = Path(values["content_dir"])
        values["content_dir"] = (base_path / raw).resolve() if not raw.is_absolute() else raw
        return ContentConfig.model_validate(values)


__all__ = ["ContentConfig"]
