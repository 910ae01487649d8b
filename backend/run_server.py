"""
Run the Price Insight backend server.
"""
import os
import sys

backend_dir = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, backend_dir)

# Load environment before settings are imported
from dotenv import load_dotenv
load_dotenv(os.path.join(backend_dir, ".env"))

import uvicorn

from price_insight.core.config import settings


if __name__ == "__main__":
    print("Starting Price Insight Backend Server...")
    print(f"API Docs: http://localhost:{settings.port}/docs")
    print("-" * 50)

    uvicorn.run(
        "price_insight.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
