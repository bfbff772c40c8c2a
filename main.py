#!/usr/bin/env python3
"""
Main Application Entry Point

Command-line interface for querying the Eversend API with the credentials
configured in the environment (.env).
"""

import argparse
import asyncio
import json
import sys
from typing import Any, List, Optional

from eversend import Eversend, EversendError
from eversend.core.logging_config import configure_from_settings, get_logger
from eversend.config.settings import get_settings
from eversend.models.transactions import GetTransactionsParams

logger = get_logger(__name__)


def _to_json(result: Any) -> str:
    """Render a model, a list of models or a scalar as JSON."""
    if isinstance(result, list):
        payload = [item.model_dump(mode='json', by_alias=True) for item in result]
    elif hasattr(result, 'model_dump'):
        payload = result.model_dump(mode='json', by_alias=True)
    else:
        payload = str(result)
    return json.dumps(payload, indent=2)


async def run_command(eversend: Eversend, args: argparse.Namespace) -> Any:
    """
    Dispatch a parsed command to the matching operation.

    Args:
        eversend: Configured client
        args: Parsed command-line arguments

    Returns:
        The operation result
    """
    if args.command == 'token':
        return await eversend.auth().generate_api_token()
    if args.command == 'profile':
        return await eversend.accounts().get_profile()
    if args.command == 'wallets':
        return await eversend.wallets().get_wallets()
    if args.command == 'wallet':
        return await eversend.wallets().get_wallet(args.currency)
    if args.command == 'transactions':
        params = GetTransactionsParams(page=args.page, limit=args.limit)
        return await eversend.transactions().get_transactions(params)
    if args.command == 'countries':
        return await eversend.payouts().get_delivery_countries()
    if args.command == 'banks':
        return await eversend.payouts().get_delivery_banks(args.country)
    raise ValueError(f"Unknown command: {args.command}")


async def _main_async(args: argparse.Namespace) -> int:
    async with Eversend.from_settings() as eversend:
        try:
            result = await run_command(eversend, args)
        except EversendError as e:
            logger.error(f"{args.command} failed: {e}")
            return 1

    print(_to_json(result))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Query the Eversend API using credentials from the environment'
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    subparsers.add_parser('token', help='Generate an API token')
    subparsers.add_parser('profile', help='Show the account profile')
    subparsers.add_parser('wallets', help='List wallets')

    wallet = subparsers.add_parser('wallet', help='Show one wallet')
    wallet.add_argument('currency', help='Wallet currency code, e.g. UGX')

    transactions = subparsers.add_parser('transactions', help='List transactions')
    transactions.add_argument('--page', type=int, default=1, help='Page number (default: 1)')
    transactions.add_argument('--limit', type=int, default=10, help='Page size (default: 10)')

    subparsers.add_parser('countries', help='List payout delivery countries')

    banks = subparsers.add_parser('banks', help='List payout delivery banks')
    banks.add_argument('country', help='Country code, e.g. NG')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    settings = get_settings()
    configure_from_settings(settings)

    args = build_parser().parse_args(argv)

    if not settings.validate():
        logger.error(
            "Missing Eversend API credentials. Please set EVERSEND_CLIENT_ID "
            "and EVERSEND_CLIENT_SECRET in your .env file."
        )
        return 1

    try:
        return asyncio.run(_main_async(args))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 1


if __name__ == '__main__':
    sys.exit(main())
