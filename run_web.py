#!/usr/bin/env python3
"""
Web Server Launcher
Serves the Textract debug overlay API with uvicorn
"""
import argparse
import uvicorn
from dotenv import load_dotenv


def main():
    load_dotenv()

    parser = argparse.ArgumentParser(description="Textract Debug Overlay - Web Interface")
    parser.add_argument('--host', default='127.0.0.1', help='Bind address (default: 127.0.0.1)')
    parser.add_argument('--port', type=int, default=8000, help='Port (default: 8000)')
    parser.add_argument('--reload', action='store_true', help='Restart when source files change')
    args = parser.parse_args()

    print(f"API docs at: http://{args.host}:{args.port}/docs")

    uvicorn.run(
        "web.backend.api:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info"
    )


if __name__ == "__main__":
    main()
