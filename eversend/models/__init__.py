"""
Request parameter models and response records, one module per resource group.
"""

from .accounts import Account
from .wallets import Wallet, ActivateWalletParams, DeactivateWalletParams
from .beneficiaries import (
    Beneficiary,
    BankDetails,
    CheckAccountParams,
    CreateBeneficiaryParams,
    EditBeneficiaryParams,
    GetBankDetailsParams,
    GetBeneficiariesParams,
)
from .collections import (
    CollectionMethod,
    CollectionFees,
    MobileMoneyCollection,
    Otp,
    GetCollectionFeesParams,
    GetCollectionOtpParams,
    GetMobileMoneyCollectionParams,
)
from .crypto import (
    CryptoAddress,
    AssetChains,
    CryptoTransaction,
    CryptoTransactionMeta,
    CreateCryptoAddressParams,
    FetchAssetChainsParams,
)
from .exchange import (
    Quotation,
    Exchange,
    ExchangeAccount,
    Balance,
    CreateQuotationParams,
    CreateExchangeParams,
)
from .payouts import (
    PayoutBeneficiary,
    PayoutTransaction,
    PayoutQuotation,
    PayoutQuotationResult,
    Bank,
    Branch,
    Country,
    CreatePayoutQuotationParams,
    CreateEversendPayoutQuotationParams,
    CreateMomoPayoutTransactionParams,
    CreateBankPayoutTransactionParams,
    CreateBeneficiaryPayoutParams,
    CreateEversendPayoutTransactionParams,
)
from .transactions import (
    Transaction,
    TransactionMeta,
    TransactionAccount,
    AccountBalance,
    TransactionCurrency,
    TransactionType,
    TransactionStatus,
    TransactionRange,
    GetTransactionParams,
    GetTransactionsParams,
)

__all__ = [
    'Account',
    'Wallet',
    'ActivateWalletParams',
    'DeactivateWalletParams',
    'Beneficiary',
    'BankDetails',
    'CheckAccountParams',
    'CreateBeneficiaryParams',
    'EditBeneficiaryParams',
    'GetBankDetailsParams',
    'GetBeneficiariesParams',
    'CollectionMethod',
    'CollectionFees',
    'MobileMoneyCollection',
    'Otp',
    'GetCollectionFeesParams',
    'GetCollectionOtpParams',
    'GetMobileMoneyCollectionParams',
    'CryptoAddress',
    'AssetChains',
    'CryptoTransaction',
    'CryptoTransactionMeta',
    'CreateCryptoAddressParams',
    'FetchAssetChainsParams',
    'Quotation',
    'Exchange',
    'ExchangeAccount',
    'Balance',
    'CreateQuotationParams',
    'CreateExchangeParams',
    'PayoutBeneficiary',
    'PayoutTransaction',
    'PayoutQuotation',
    'PayoutQuotationResult',
    'Bank',
    'Branch',
    'Country',
    'CreatePayoutQuotationParams',
    'CreateEversendPayoutQuotationParams',
    'CreateMomoPayoutTransactionParams',
    'CreateBankPayoutTransactionParams',
    'CreateBeneficiaryPayoutParams',
    'CreateEversendPayoutTransactionParams',
    'Transaction',
    'TransactionMeta',
    'TransactionAccount',
    'AccountBalance',
    'TransactionCurrency',
    'TransactionType',
    'TransactionStatus',
    'TransactionRange',
    'GetTransactionParams',
    'GetTransactionsParams',
]
