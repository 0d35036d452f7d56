"""
Command line entry point - prints a passphrase drawn from a BIP39 word list
"""

import argparse
import sys

from diceware.config import Settings, get_settings, validate_settings
from diceware.errors import ConfigurationError
from diceware.generator import InvalidArgumentError
from diceware.limits import WORDS_PER_LINE, entropy_bits
from diceware.logging_config import log_rejected_request, setup_logging
from diceware.passphrase import PassphraseGenerator
from diceware.wordlist import available_languages


def build_parser():
    parser = argparse.ArgumentParser(
        prog="diceware",
        description="Generate a passphrase from randomly drawn words.",
    )
    parser.add_argument(
        "count", nargs="?", type=int,
        help="number of words (default: DICEWARE_WORD_COUNT or 6)",
    )
    repeats = parser.add_mutually_exclusive_group()
    repeats.add_argument(
        "-u", "--unique", dest="allow_duplicates", action="store_const", const=False,
        help="never repeat a word",
    )
    repeats.add_argument(
        "--allow-duplicates", dest="allow_duplicates", action="store_const", const=True,
        help="allow repeated words (overrides DICEWARE_ALLOW_DUPLICATES=false)",
    )
    parser.add_argument("-s", "--separator", help="text placed between words")
    parser.add_argument("-l", "--language", help="BIP39 word list language")
    parser.add_argument("--seed", type=int, help="seed for reproducible output")
    parser.add_argument(
        "-n", "--numbered", action="store_true",
        help="print numbered words instead of a single line",
    )
    parser.add_argument(
        "-e", "--entropy", action="store_true",
        help="print the estimated entropy in bits",
    )
    parser.add_argument(
        "--list-languages", action="store_true",
        help="print available word list languages and exit",
    )
    return parser


def merge_settings(args, base: Settings) -> Settings:
    """Command line options override environment settings"""
    overrides = {}
    if args.count is not None:
        overrides["WORD_COUNT"] = args.count
    if args.allow_duplicates is not None:
        overrides["ALLOW_DUPLICATES"] = args.allow_duplicates
    if args.separator is not None:
        overrides["SEPARATOR"] = args.separator
    if args.language is not None:
        overrides["LANGUAGE"] = args.language
    if args.seed is not None:
        overrides["SEED"] = args.seed
    return base.model_copy(update=overrides)


def format_numbered(words):
    """Numbered words, three per line"""
    lines = []
    for i in range(0, len(words), WORDS_PER_LINE):
        row = words[i:i + WORDS_PER_LINE]
        line = "  ".join(f"{i + j + 1:2}. {word:<12}" for j, word in enumerate(row))
        lines.append(line.rstrip())
    return "\n".join(lines)


def error(message: str) -> int:
    print(f"[DICEWARE] ERROR: {message}", file=sys.stderr)
    return 1


def main(argv=None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)

    if args.list_languages:
        for language in available_languages():
            print(language)
        return 0

    setup_logging()

    try:
        settings = merge_settings(args, get_settings())
        validate_settings(settings)
        setup_logging(settings.LOG_LEVEL)
        generator = PassphraseGenerator.from_settings(settings)
        passphrase = generator.generate(settings.WORD_COUNT, settings.ALLOW_DUPLICATES)
    except (ConfigurationError, InvalidArgumentError) as e:
        log_rejected_request(str(e))
        return error(str(e))

    if args.numbered:
        print(format_numbered(passphrase.words))
    else:
        print(passphrase.phrase)

    if args.entropy:
        bits = entropy_bits(generator.sampler.pool_size, len(passphrase.words))
        print(f"[DICEWARE] ~{bits:.1f} bits of entropy", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
