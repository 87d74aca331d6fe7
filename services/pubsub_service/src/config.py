from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Core
    service_name: str = "pubsub-greeter"
    environment: str = "local"
    log_level: str = "INFO"

    # Cloud Run injects PORT
    port: int = 8080

    # Tracing
    tracing_enabled: bool = True
    use_cloud_trace: bool = False

settings = Settings()
