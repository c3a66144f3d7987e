from pydantic_settings import BaseSettings
from functools import lru_cache
from pathlib import Path

from .services.scripts.platform import DEFAULT_PLATFORMS


class Settings(BaseSettings):
    # Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = "INFO"

    # Build output directory of the project (the build tool's target folder)
    build_directory: str = "target"

    # Subfolder of the build directory the scripts are written to
    bin_folder: str = "bin"

    # Platforms used when none are given on the command line
    default_platforms: str = DEFAULT_PLATFORMS

    # Executable used in the generated launch line
    java_command: str = "java"

    @property
    def output_folder(self) -> Path:
        """Default destination folder for generated scripts."""
        return Path(self.build_directory) / self.bin_folder

    class Config:
        env_prefix = "EASYPACK_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore unrelated entries in .env
        case_sensitive = False

@lru_cache()
def get_settings():
    return Settings()
