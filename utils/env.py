import os
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console

console = Console()

ENV_PATH = Path(__file__).resolve().parent.parent / ".env"


def load_env(env_path=ENV_PATH):
    load_dotenv(dotenv_path=env_path)


def validate_env_vars(required_vars):
    """Ensure all required environment variables are set."""
    missing = [var for var in required_vars if not os.getenv(var)]
    if missing:
        console.print(
            f"[bold red]❌ Missing required environment variables: {', '.join(missing)}[/bold red]"
        )
        raise SystemExit(1)


def config_from_env(title=None, word_check=None) -> dict:
    """Build the plugin config mapping from `.env`; explicit arguments win over the environment."""
    return {
        "api_token": os.getenv("MAIMEMO_API_TOKEN", ""),
        "word_list_title": title or os.getenv("MAIMEMO_WORD_LIST_TITLE", ""),
        "enable_word_check": word_check or os.getenv("MAIMEMO_ENABLE_WORD_CHECK", "enable"),
    }
