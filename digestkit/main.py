"""
digestkit - Command Line Entry Point

Usage:
    digestkit "hello" "abc"            # one line per message
    echo hello | digestkit             # one line per stdin line
    digestkit --provider pure "abc"    # force the pure-Python engine
    digestkit --self-test              # check NIST vectors on every provider
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from .dispatcher import digest_sync, to_hex, PROVIDER_ENV_VAR
from .providers.digest_providers import ProviderError, available_providers


PROVIDER_CHOICES = ('auto', 'native', 'openssl', 'hashlib', 'pure')

# (message, expected digest) pairs from FIPS 180-2 / NIST examples
SELF_TEST_VECTORS = [
    ("", "E3B0C44298FC1C149AFBF4C8996FB92427AE41E4649B934CA495991B7852B855"),
    ("abc", "BA7816BF8F01CFEA414140DE5DAE2223B00361A396177A9CB410FF61F20015AD"),
    ("abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq",
     "248D6A61D20638B8E5C026930C3E6039A33CE45964FF2167F6ECEDD419DB06C1"),
    ("abcdefghbcdefghicdefghijdefghijkefghijklfghijklmghijklmnhijklmno"
     "ijklmnopjklmnopqklmnopqrlmnopqrsmnopqrstnopqrstu",
     "CF5B16A778AF8380036CE59E7B0492370B249B11E8F07A51AFAC45037AFEE9D1"),
]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='digestkit',
        description='Print the uppercase SHA-256 digest of text messages.',
    )
    parser.add_argument('messages', nargs='*',
                        help='messages to hash (default: read lines from stdin)')
    parser.add_argument('--provider', choices=PROVIDER_CHOICES, default=None,
                        help=f'digest provider (default: ${PROVIDER_ENV_VAR} or auto)')
    parser.add_argument('--self-test', action='store_true',
                        help='verify known vectors against every available provider')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='enable debug logging')
    return parser


def run_self_test(out=None) -> bool:
    """
    Run SELF_TEST_VECTORS through every available provider.

    Returns:
        True if every provider produced every expected digest
    """
    if out is None:
        out = sys.stdout
    all_passed = True
    for provider in available_providers():
        for message, expected in SELF_TEST_VECTORS:
            result = to_hex(provider.compute(message.encode('utf-8')))
            passed = result == expected
            all_passed = all_passed and passed
            label = message if len(message) <= 20 else message[:20] + '...'
            print(f"{'PASS' if passed else 'FAIL'}  {provider.name:<8} {label!r}", file=out)
    return all_passed


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for digestkit."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    if args.self_test:
        return 0 if run_self_test() else 1

    messages: List[str] = list(args.messages)
    if not messages:
        messages = [line.rstrip('\r\n') for line in sys.stdin]

    try:
        for message in messages:
            print(f"{digest_sync(message, provider=args.provider)}  {message}")
    except ProviderError as exc:
        print(f"digestkit: {exc}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
