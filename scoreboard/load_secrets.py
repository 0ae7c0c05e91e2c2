import os
from dotenv import load_dotenv

load_dotenv()

app_env = os.getenv("APP_ENV", "development")
redis_url = os.getenv("REDIS_URL") or None
cors_origins = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]
log_level = os.getenv("LOG_LEVEL", "INFO").upper()
host = os.getenv("HOST", "0.0.0.0")
port = int(os.getenv("PORT", "8080"))

if __name__ == "__main__":
    print(app_env, redis_url, cors_origins, log_level, host, port)
