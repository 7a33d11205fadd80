import uvicorn

from quiz_api.core.config import get_settings


if __name__ == "__main__":
    settings = get_settings()
    print(f"Server running on port {settings.PORT}")
    print(f"Health check: http://localhost:{settings.PORT}/health")
    uvicorn.run("quiz_api.main:app", host=settings.HOST, port=settings.PORT)
