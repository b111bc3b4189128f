#!/usr/bin/env python3
"""
CLI for quick fun-fact answers.

Usage:
    python cli/quick_chat.py "Why do cats purr?"
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from kids_news.config import get_api_key
from kids_news.core.errors import GenerationError
from kids_news.core.modules.quick_chat import QuickChat
from kids_news.logging import configure_logging, use_json_logs


def main():
    parser = argparse.ArgumentParser(description="Ask a question, get a short fun answer for kids")
    parser.add_argument("question", type=str, help="The question to ask")
    args = parser.parse_args()

    configure_logging(json_format=use_json_logs())

    try:
        chat = QuickChat(api_key=get_api_key())
        answer = asyncio.run(chat.ask(args.question))
    except GenerationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(answer)


if __name__ == "__main__":
    main()
