#!/usr/bin/env python3
"""
isovin CLI - Command Line Interface
===================================

Main CLI entry point for VIN checks.

Usage:
    isovin check <vin>                   Validate a VIN and show its segments
    isovin propose <text>                Repair any text into a valid VIN
    isovin decode <vin> --table <file>   Segments plus WMI region/country/manufacturer

Exit codes for `check`: 0 valid with checksum, 2 valid without checksum,
1 invalid.
"""

import argparse
import json
import logging
import sys
from typing import Dict, List, Optional

from .config import get_config, setup_logging
from .core import VIN, Validity, get_proposer
from .exceptions import VINError
from .lookup import FileResolver, WMILookup

logger = logging.getLogger(__name__)

_CHECK_EXIT_CODES = {
    Validity.VALID_WITH_CHECKSUM: 0,
    Validity.VALID: 2,
    Validity.INVALID: 1,
}


def _vin_summary(vin: VIN) -> Dict:
    return {
        'vin': vin.content,
        'validity': vin.validity.value,
        'is_valid': vin.is_valid,
        'checksum_valid': vin.is_checksum_valid,
        'checksum_digit': vin.checksum_digit,
        'wmi': vin.wmi,
        'vds': vin.vds,
        'vis': vin.vis,
    }


def cmd_check(args):
    """Validate a single VIN."""
    vin = VIN(args.vin)
    summary = _vin_summary(vin)

    if args.json:
        print(json.dumps(summary, indent=2))
    else:
        print(f"VIN: {vin}")
        print(f"Validity: {vin.validity.value}")
        if vin.is_valid:
            print(f"WMI: {vin.wmi}  VDS: {vin.vds}  VIS: {vin.vis}")

    return _CHECK_EXIT_CODES[vin.validity]


def cmd_propose(args):
    """Propose a valid VIN from arbitrary text."""
    result = get_proposer().propose_with_details(args.text)
    show_details = args.details or get_config().show_corrections

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return 0

    print(result.vin)
    if show_details:
        for correction in result.corrections:
            print(f"  - {correction}")

    return 0


def cmd_decode(args):
    """Decode segments and name the WMI."""
    config = get_config()
    table = args.table or config.lookup.table_path
    if not table:
        print("Error: No WMI table given (use --table or VIN_WMI_TABLE)")
        return 1

    vin = VIN(args.vin)
    lookup = WMILookup(
        FileResolver(table),
        namespace=config.lookup.namespace,
        placeholder=config.lookup.placeholder,
    )
    summary = _vin_summary(vin)
    summary.update(lookup.describe(vin).to_dict())

    if args.json:
        print(json.dumps(summary, indent=2))
    else:
        for key in ('vin', 'validity', 'wmi', 'region', 'country', 'manufacturer', 'vds', 'vis'):
            print(f"{key.capitalize()}: {summary[key]}")

    return 0 if vin.is_valid else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='isovin',
        description='isovin - Validate, decompose and repair ISO 3779 Vehicle Identification Numbers',
    )
    parser.add_argument('--version', action='version', version='%(prog)s 1.0.0')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Check command
    check_parser = subparsers.add_parser('check', help='Validate a VIN')
    check_parser.add_argument('vin', help='VIN to validate')
    check_parser.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # Propose command
    propose_parser = subparsers.add_parser('propose', help='Repair text into a valid VIN')
    propose_parser.add_argument('text', help='Arbitrary input text')
    propose_parser.add_argument('--details', '-d', action='store_true', help='List applied corrections')
    propose_parser.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # Decode command
    decode_parser = subparsers.add_parser('decode', help='Decode a VIN and name its manufacturer')
    decode_parser.add_argument('vin', help='VIN to decode')
    decode_parser.add_argument('--table', '-t', help='WMI lookup table (.json, .yaml)')
    decode_parser.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    setup_logging(get_config().logging)

    commands = {
        'check': cmd_check,
        'propose': cmd_propose,
        'decode': cmd_decode,
    }

    try:
        return commands[args.command](args)
    except VINError as e:
        logger.debug(f"{args.command} failed", exc_info=True)
        print(f"Error: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
