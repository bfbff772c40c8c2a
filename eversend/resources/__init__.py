"""
Resource groups, one per REST sub-path.
"""

from .base import BaseResource
from .accounts import Accounts
from .auth import Auth
from .beneficiaries import Beneficiaries
from .collections import Collections
from .crypto import Crypto
from .exchange import Exchange
from .payouts import Payouts
from .transactions import Transactions
from .wallets import Wallets

__all__ = [
    'BaseResource',
    'Accounts',
    'Auth',
    'Beneficiaries',
    'Collections',
    'Crypto',
    'Exchange',
    'Payouts',
    'Transactions',
    'Wallets',
]
