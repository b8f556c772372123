from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    PROJECT_NAME: str = "meat-quality-classifier"

    AUTH_ENABLED: bool = True
    JWT_SECRET: str = "change_me"
    JWT_ALGORITHM: str = "HS256"

    MODEL_PATH: str = "artifacts/model.tflite"
    IMAGE_SIZE: int = 224

    # gallery URIs resolve under this directory
    MEDIA_DIR: str = "media"

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
