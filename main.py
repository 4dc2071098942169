import uvicorn

from app.config import Config


CONFIG = Config()


if __name__ == "__main__":
    uvicorn.run(
        "app.app:app",
        host=CONFIG.host,
        port=CONFIG.port,
        log_level=CONFIG.log_level.lower(),
    )
