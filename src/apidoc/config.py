from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    """
    Resolved defaults for the CLI. Command-line options take precedence.

    Env vars:
      APIDOC_APPLICATION_NAME  first half of the document title (default: cwd name)
      APIDOC_DOCUMENT_NAME     document to build (default: v1)
      APIDOC_LOG_LEVEL         root log level (default: WARNING)
    """

    application_name: str
    document_name: str
    log_level: str


def _default_application_name() -> str:
    return Path.cwd().name or "api"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # .env in the working directory, real environment wins
    load_dotenv(Path.cwd() / ".env", override=False)

    return Settings(
        application_name=os.getenv("APIDOC_APPLICATION_NAME") or _default_application_name(),
        document_name=os.getenv("APIDOC_DOCUMENT_NAME") or "v1",
        log_level=(os.getenv("APIDOC_LOG_LEVEL") or "WARNING").upper(),
    )
