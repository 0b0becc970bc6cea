from os import getenv


class Settings:
    DATABASE_URL = getenv("DATABASE_URL", "sqlite:///./todosphere.db")
    JWT_SECRET = getenv("JWT_SECRET", "dev-secret-change-in-prod")
    JWT_EXPIRE_MIN = int(getenv("JWT_EXPIRE_MIN", "15"))  # 15 minutes
    JWT_REFRESH_EXPIRE_MIN = int(getenv("JWT_REFRESH_EXPIRE_MIN", "43200"))  # 30 jours
    LOG_LEVEL = getenv("LOG_LEVEL", "INFO").upper()
    CORS_ORIGINS = [
        origin.strip()
        for origin in getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
        if origin.strip()
    ]
    # utilisé par le client HTTP (todosphere.client)
    API_BASE_URL = getenv("API_BASE_URL", "http://localhost:5001/api")


settings = Settings()
