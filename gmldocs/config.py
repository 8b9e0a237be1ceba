"""Application configuration loaded from environment variables."""

from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global importer settings."""

    manual_root: Optional[str] = Field(
        default=None,
        description="GameMaker Studio 2 install folder. Platform default when unset.",
    )
    archive_relpath: str = "chm2web/YoYoStudioHelp.zip"
    fnames_relpath: str = "TextEditor/fnames14"
    doc_roots: List[str] = Field(
        default_factory=lambda: [
            "source/_build/3_scripting/4_gml_reference",
            "source/_build/3_scripting/3_gml_overview",
        ]
    )
    link_base: str = "https://docs2.yoyogames.com/"
    output_path: str = "docs.json"

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def manual_root_path(self) -> Optional[Path]:
        return Path(self.manual_root) if self.manual_root else None

    @property
    def output_path_obj(self) -> Path:
        return Path(self.output_path)


settings = Settings()
