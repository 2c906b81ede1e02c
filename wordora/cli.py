"""Command-line interface: interactive chat and the HTTP server."""

import argparse
import random
import sys
from typing import Optional, TextIO

from wordora.config import settings
from wordora.services.chatbot import ChatBot
from wordora.services.corpus import load_corpus
from wordora.services.generator import GenerationError
from wordora.utils.logger import ROOT_LOGGER, set_level, setup_logger

logger = setup_logger(__name__)

LOG_LEVEL_HELP = "Override LOG_LEVEL (debug, info, warning, ...)"


def chat_loop(bot: ChatBot, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    """
    Read one line at a time and print a reply until `exit` or end of input.

    Returns the process exit status.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    print(settings.BANNER, file=stdout)

    while True:
        stdout.write(settings.PROMPT)
        stdout.flush()

        try:
            line = stdin.readline()
        except OSError as e:
            logger.error(f"[ERR] Failed to read input: {e}")
            return 1

        # EOF
        if not line:
            stdout.write("\n")
            return 0

        text = line.strip()
        if text == settings.EXIT_COMMAND:
            return 0

        try:
            response = bot.reply(text)
        except GenerationError as e:
            logger.error(f"[ERR] {e}")
            continue

        print(f"{settings.REPLY_LABEL}{response}", file=stdout)


def chat(args) -> int:
    bot = ChatBot.from_settings(settings)
    if args.seed is not None:
        bot.generator.rng = random.Random(args.seed)
    if args.length is not None:
        bot.reply_length = args.length

    try:
        text = load_corpus(args.corpus or settings.CORPUS_PATH)
    except FileNotFoundError as e:
        logger.error(f"[ERR] {e}")
        return 1

    bot.train(text)
    return chat_loop(bot)


def serve(args) -> int:
    import uvicorn

    # wordora.app configures its loggers from settings at import
    if args.log_level:
        settings.LOG_LEVEL = args.log_level

    uvicorn.run(
        "wordora.app:app",
        host=args.host or settings.HOST,
        port=args.port or settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    # Subcommands accept --log-level too; SUPPRESS keeps a top-level value intact
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--log-level", default=argparse.SUPPRESS, help=LOG_LEVEL_HELP)

    parser = argparse.ArgumentParser(prog="wordora", description="Markov chain chat bot")
    parser.add_argument("--log-level", help=LOG_LEVEL_HELP)
    subparsers = parser.add_subparsers(dest="command")

    chat_parser = subparsers.add_parser("chat", parents=[common], help="Chat with the bot on the console")
    chat_parser.add_argument("--corpus", help="UTF-8 training text (default: packaged corpus)")
    chat_parser.add_argument("--length", type=int, help="Tokens per reply")
    chat_parser.add_argument("--seed", type=int, help="Random seed for reproducible replies")
    chat_parser.set_defaults(func=chat)

    serve_parser = subparsers.add_parser("serve", parents=[common], help="Run the HTTP service")
    serve_parser.add_argument("--host", help="Bind address")
    serve_parser.add_argument("--port", type=int, help="Bind port")
    serve_parser.set_defaults(func=serve)

    return parser


def main(argv: Optional[list] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logger(ROOT_LOGGER, args.log_level)
    set_level(args.log_level)

    # Plain `wordora` starts a chat
    if args.command is None:
        args = parser.parse_args(["chat"] if argv is None else list(argv) + ["chat"])
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
