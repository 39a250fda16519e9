from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional
import os

# Load .env file if it exists, for local development
# In production, environment variables should be set directly.
if os.path.exists(".env"):
    from dotenv import load_dotenv
    load_dotenv()

class AppSettings(BaseSettings):
    questionnaire_path: Optional[str] = None  # YAML override for the built-in questions
    log_level: str = "INFO"
    json_logs: bool = True
    cors_origins: List[str] = ["*"]

    model_config = SettingsConfigDict(env_prefix='GARDEN_')

# Instantiate settings
app_settings = AppSettings()
