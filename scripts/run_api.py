#!/usr/bin/env python3
"""
Serve the flow runner over HTTP
"""
import argparse
from typing import List, Optional

import uvicorn
from dotenv import load_dotenv

from infrastructure.logging.log_setup import setup_console_logging


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="flow-test-api")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--reload", action="store_true", help="Restart on code changes (development)")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)

    load_dotenv()
    setup_console_logging(level=args.log_level)
    uvicorn.run("api.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
