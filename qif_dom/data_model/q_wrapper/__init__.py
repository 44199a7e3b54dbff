# qif_dom/data_model/q_wrapper/__init__.py

from .q_account import AccountTransaction, QAccount
from .q_bank_split import QBankSplit
from .q_bank_transaction import QBankTransaction
from .q_category import QCategory
from .q_class import QClass
from .q_document import FLAT_TRANSACTION_ORDER, QifDocument
from .q_investment_transaction import QInvestmentTransaction
from .q_memorized_transaction import QAmortization, QMemorizedTransaction
from .q_price import QPrice
from .q_security import QSecurity
from .q_tag import QTag
from .qif_codes import QifCode
from .qif_header import QifHeader

__all__ = [
    "AccountTransaction",
    "FLAT_TRANSACTION_ORDER",
    "QifCode",
    "QifHeader",
    "QifDocument",
    "QAccount",
    "QAmortization",
    "QBankSplit",
    "QBankTransaction",
    "QCategory",
    "QClass",
    "QInvestmentTransaction",
    "QMemorizedTransaction",
    "QPrice",
    "QSecurity",
    "QTag",
]
