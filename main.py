"""
Product Description Writer - Web Server Entry Point
===================================================

Run this to start the web UI:
    python main.py

Then open http://127.0.0.1:8000 in your browser.

To generate from the terminal instead:
    python describe.py
"""

import sys
import logging
from pathlib import Path

import uvicorn

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from product_writer.infrastructure.config import get_settings


def main():
    """Start the web server."""
    web = get_settings().web

    logging.basicConfig(
        level=web.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    print("\n" + "=" * 50)
    print("   AI Product Description Writer")
    print("=" * 50)
    print(f"\n   Starting server at http://{web.host}:{web.port}")
    print("   Press Ctrl+C to stop\n")

    uvicorn.run(
        "product_writer.web.app:app",
        host=web.host,
        port=web.port,
        reload=web.reload,
        log_level=web.log_level
    )


if __name__ == "__main__":
    main()
