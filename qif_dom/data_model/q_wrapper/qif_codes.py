# qif_dom/data_model/q_wrapper/qif_codes.py
"""
Catalogue of QIF field codes, one namespace per record kind.

The same letter means different things in different record kinds (``T`` is
an amount in a transaction, the type in an account and the tax flag in a
category), so codes are always looked up through their record's namespace.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class QifCode:
    code: str
    description: str
    used_in: str

    def __str__(self) -> str:
        return self.code


class BankCodes:
    DATE = QifCode("D", "Date", "Banking")
    AMOUNT = QifCode("T", "Amount", "Banking")
    AMOUNT_ALIAS = QifCode("U", "Amount (duplicate of T)", "Banking")
    CLEARED = QifCode("C", "Cleared status", "Banking")
    NUMBER = QifCode("N", "Check or reference number", "Banking")
    PAYEE = QifCode("P", "Payee", "Banking")
    MEMO = QifCode("M", "Memo", "Banking")
    ADDRESS = QifCode("A", "Address line", "Banking")
    CATEGORY = QifCode("L", "Category, class or [transfer account]", "Banking")
    SPLIT_CATEGORY = QifCode("S", "Split category", "Splits")
    SPLIT_MEMO = QifCode("E", "Split memo", "Splits")
    SPLIT_AMOUNT = QifCode("$", "Split amount", "Splits")
    SPLIT_PERCENT = QifCode("%", "Split percentage", "Splits")


class MemorizedCodes:
    TYPE = QifCode("K", "Memorized transaction type", "Memorized")
    FIRST_PAYMENT_DATE = QifCode("1", "Amortization: first payment date", "Memorized")
    TOTAL_YEARS = QifCode("2", "Amortization: total years for loan", "Memorized")
    PAYMENTS_MADE = QifCode("3", "Amortization: number of payments made", "Memorized")
    PERIODS_PER_YEAR = QifCode("4", "Amortization: periods per year", "Memorized")
    INTEREST_RATE = QifCode("5", "Amortization: interest rate", "Memorized")
    CURRENT_BALANCE = QifCode("6", "Amortization: current loan balance", "Memorized")
    ORIGINAL_AMOUNT = QifCode("7", "Amortization: original loan amount", "Memorized")


class InvestmentCodes:
    DATE = QifCode("D", "Date", "Investment")
    ACTION = QifCode("N", "Investment action", "Investment")
    SECURITY = QifCode("Y", "Security name", "Investment")
    PRICE = QifCode("I", "Price", "Investment")
    QUANTITY = QifCode("Q", "Quantity of shares", "Investment")
    AMOUNT = QifCode("T", "Transaction amount", "Investment")
    AMOUNT_ALIAS = QifCode("U", "Transaction amount (duplicate of T)", "Investment")
    CLEARED = QifCode("C", "Cleared status", "Investment")
    PAYEE = QifCode("P", "Text in the first line", "Investment")
    MEMO = QifCode("M", "Memo", "Investment")
    COMMISSION = QifCode("O", "Commission cost", "Investment")
    TRANSFER_ACCOUNT = QifCode("L", "Account for the transfer", "Investment")
    TRANSFER_AMOUNT = QifCode("$", "Amount transferred", "Investment")


class AccountCodes:
    NAME = QifCode("N", "Name", "Account")
    TYPE = QifCode("T", "Type of account", "Account")
    DESCRIPTION = QifCode("D", "Description", "Account")
    CREDIT_LIMIT = QifCode("L", "Credit limit (credit card accounts)", "Account")
    STATEMENT_BALANCE_DATE = QifCode("/", "Statement balance date", "Account")
    STATEMENT_BALANCE = QifCode("$", "Statement balance", "Account")


class CategoryCodes:
    NAME = QifCode("N", "Category name:subcategory name", "Category")
    DESCRIPTION = QifCode("D", "Description", "Category")
    TAX_RELATED = QifCode("T", "Tax related if included", "Category")
    TAX_SCHEDULE = QifCode("R", "Tax schedule information", "Category")
    INCOME = QifCode("I", "Income category", "Category")
    EXPENSE = QifCode("E", "Expense category (the default)", "Category")
    BUDGET = QifCode("B", "Budget amount", "Category")


class ClassCodes:
    NAME = QifCode("N", "Class name", "Class")
    DESCRIPTION = QifCode("D", "Description", "Class")


class SecurityCodes:
    NAME = QifCode("N", "Security name", "Security")
    SYMBOL = QifCode("S", "Ticker symbol", "Security")
    TYPE = QifCode("T", "Security type", "Security")
    GOAL = QifCode("G", "Investment goal", "Security")
    DESCRIPTION = QifCode("D", "Description", "Security")


class TagCodes:
    NAME = QifCode("N", "Tag name", "Tag")
    DESCRIPTION = QifCode("D", "Description", "Tag")
