import os
from pathlib import Path
from dotenv import load_dotenv

class Config:
    def __init__(self):
        # Load appropriate .env file based on environment
        self.env = os.getenv("SIDEHUSTLE_ENV", "dev")
        self._load_env_file()

        # OpenAI settings
        self.openai_api_key = os.getenv("OPENAI_API_KEY")
        self.strict_schema = os.getenv("OPENAI_STRICT_SCHEMA", "true").lower() not in ("0", "false", "no")

        # Logging settings
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.log_format = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    def _load_env_file(self):
        """Load the appropriate .env file based on the environment."""
        env_file = ".env"

        # Check for environment-specific .env file
        if self.env != "dev":
            env_specific_file = f".env.{self.env}"
            if Path(env_specific_file).exists():
                env_file = env_specific_file
                print(f"Loading environment from {env_file}")
            else:
                print(f"Warning: {env_specific_file} not found, falling back to .env")

        # Load the environment file
        load_dotenv(env_file)

# Create a global config instance
config = Config()
