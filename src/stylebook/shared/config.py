from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    api_key: str
    download_filename: str = "vibecheck-style-guide.md"
    multi_color_per_line: bool = False
    feedback_seconds: float = 2.0
    scroll_delay_ms: int = 100
    max_guides: int = 100
    log_level: str = "INFO"

    model_config = {"env_prefix": "STYLEBOOK_"}
