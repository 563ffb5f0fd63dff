"""
FastAPI Production Application

Main entry point for the Fulfillo Operations Hub API.
"""

from fastapi import FastAPI

from fulfillo.config import get_settings
from fulfillo.serving.api import create_api_app

settings = get_settings()

app: FastAPI = create_api_app(settings)


@app.get("/api/v1/info")
async def api_info():
    """API information endpoint."""
    return {
        "name": "Fulfillo Operations Hub API",
        "version": settings.version,
        "environment": settings.app_env,
        "documentation": "/docs",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
