from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    base_url: str = "https://godbolt.org"
    source_file: str = "main.cpp"
    log_level: str = "WARNING"

    @classmethod
    def settings_customise_sources(cls, settings_cls, init_settings, env_settings, dotenv_settings, file_secret_settings):
        # only explicit keyword arguments, the environment is never read
        return (init_settings,)

settings = Settings()
