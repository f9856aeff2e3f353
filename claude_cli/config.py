import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel

# Load environment variables from .env file
load_dotenv()


class Settings(BaseModel):
    debug: bool = os.getenv("CLAUDE_CLI_DEBUG", "false").lower() == "true"

    # Messages API endpoint; these are fixed and never read from the environment
    api_url: str = "https://api.anthropic.com/v1/messages"
    api_version: str = "2023-06-01"
    model: str = "claude-3-5-sonnet-20241022"
    max_tokens: int = 1024


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
