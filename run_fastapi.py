"""
Main entry point for the FastAPI application.
Run this file to start the FastAPI server.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn message_api.fastapi_app:app --host 0.0.0.0 --port 5001 --reload
"""

import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import uvicorn

from message_api.config.settings import Config

if __name__ == "__main__":
    env = os.getenv("APP_ENV", "development")
    debug = env == "development" or Config.DEBUG

    print(f"Starting FastAPI application in {env} mode...")
    print(f"Server running on http://{Config.HOST}:{Config.PORT}")
    print(f"API docs available at http://{Config.HOST}:{Config.PORT}/docs")

    uvicorn.run(
        "message_api.fastapi_app:app",
        host=Config.HOST,
        port=Config.PORT,
        reload=debug,
        log_level="info" if debug else "warning",
    )
