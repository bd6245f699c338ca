"""Backend payload models."""

from bank_terminal.models.account import (
    ACCOUNT_CLASSES,
    Account,
    AccountUpdateRequest,
    AccountUpdateResponse,
    CheckingAccount,
    CheckingAccountRequest,
    GlobalAccount,
    GlobalAccountRequest,
    SavingsAccount,
    SavingsAccountRequest,
    YouthAccount,
    YouthAccountRequest,
)
from bank_terminal.models.auto_debit import AutoDebit, AutoDebitRequest
from bank_terminal.models.base import (
    Address,
    AddressRequest,
    AddressUpdateRequest,
    Phone,
    PostalCodeLookup,
)
from bank_terminal.models.customer import Customer, CustomerRequest, CustomerUpdateRequest
from bank_terminal.models.enums import (
    AccountKind,
    AccountStatus,
    AddressKind,
    CustomerSegment,
    DebitFrequency,
    DebitStatus,
    PhoneKind,
    ServiceKind,
    TransactionKind,
    UserRole,
)
from bank_terminal.models.manager import LoginRequest, Manager, ManagerRequest
from bank_terminal.models.transaction import (
    DepositRequest,
    InternationalDepositRequest,
    InternationalWithdrawalRequest,
    Transaction,
    TransferRequest,
    WithdrawalRequest,
)

__all__ = [
    "ACCOUNT_CLASSES",
    "Account",
    "AccountKind",
    "AccountStatus",
    "AccountUpdateRequest",
    "AccountUpdateResponse",
    "Address",
    "AddressKind",
    "AddressRequest",
    "AddressUpdateRequest",
    "AutoDebit",
    "AutoDebitRequest",
    "CheckingAccount",
    "CheckingAccountRequest",
    "Customer",
    "CustomerRequest",
    "CustomerSegment",
    "CustomerUpdateRequest",
    "DebitFrequency",
    "DebitStatus",
    "DepositRequest",
    "GlobalAccount",
    "GlobalAccountRequest",
    "InternationalDepositRequest",
    "InternationalWithdrawalRequest",
    "LoginRequest",
    "Manager",
    "ManagerRequest",
    "Phone",
    "PhoneKind",
    "PostalCodeLookup",
    "SavingsAccount",
    "SavingsAccountRequest",
    "ServiceKind",
    "Transaction",
    "TransactionKind",
    "TransferRequest",
    "UserRole",
    "WithdrawalRequest",
    "YouthAccount",
    "YouthAccountRequest",
]
