#!/usr/bin/env python3
"""
Command line interface - validate or parse an identity number and print JSON
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from ident_engine.checks.validators import ValidationStatus
from ident_engine.data.patterns import CountryCode, IdentifierType
from ident_engine.identity import AUTO, parse_id, validate_id
from ident_engine.validation_config import VERSION, ValidationConfig

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='ident-engine',
        description='Validate and parse national identity and passport numbers',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Find every country where a number is valid and decode it
  ident-engine 8001015009087

  # Validate against one country only
  ident-engine 219-09-9999 --country US --validate-only

  # Passport numbers
  ident-engine 123456789 --type passport
        """
    )

    parser.add_argument('identity_number', help='Identity or passport number (quote it if it contains spaces)')
    parser.add_argument(
        '--country',
        choices=[AUTO] + [country.value for country in CountryCode],
        default=AUTO,
        help='Country to validate against (default: auto)'
    )
    parser.add_argument(
        '--type',
        dest='identifier_type',
        choices=['national', 'passport'],
        default='national',
        help='Identifier type (default: national)'
    )
    parser.add_argument('--validate-only', action='store_true', help='Skip field extraction')
    parser.add_argument('--config', help='Config file (default: ~/.ident_engine/config.json)')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging to stderr')
    parser.add_argument('--version', action='version', version=f'%(prog)s {VERSION}')
    return parser


def main(argv=None) -> int:
    """CLI entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )

    if args.config and not Path(args.config).is_file():
        parser.error(f"config file not found: {args.config}")
    config = ValidationConfig(args.config) if args.config else ValidationConfig(persist=False)
    logger.debug(f"Using config {config.config_path or 'built-in defaults'}")

    identifier_type = IdentifierType.PASSPORT if args.identifier_type == 'passport' else IdentifierType.NATIONAL_IDENTITY
    run = validate_id if args.validate_only else parse_id
    result = run(args.identity_number, args.country, identifier_type, config)

    print(json.dumps(result.to_dict(), indent=2))
    return 0 if result.status == ValidationStatus.VALID else 1


if __name__ == "__main__":
    sys.exit(main())
