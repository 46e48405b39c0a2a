from pydantic import BaseModel, Field


class LoggingConfig(BaseModel):
    level: str = Field("WARNING", description="Log level for the standard library root logger.")
    json_logs: bool = Field(False, description="Render log events as JSON lines.")

    @classmethod
    def default(cls):
        return LoggingConfig()
