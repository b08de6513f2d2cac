"""Code lists of the currency transaction report (CTR)."""

from __future__ import annotations

from fincenxml.core import validate_code

ACTIVITY_PARTY_CODES = ("35", "37", "30", "34", "50", "17", "23", "58", "8")
PARTY_IDENTIFICATION_CODES = (
    "1", "2", "4", "5", "6", "7", "9", "10", "11", "12", "13", "14", "28", "999",
)
PARTY_NAME_CODES = ("L", "AKA", "DBA")
FEDERAL_REGULATOR_CODES = ("9", "1", "2", "7", "3", "4", "6", "14")
PARTY_ACCOUNT_ASSOCIATION_CODES = ("8", "9")
CASH_IN_DETAIL_CODES = (
    "55", "46", "23", "12", "14", "49", "18", "21", "25", "997", "53",
)
CASH_OUT_DETAIL_CODES = (
    "56", "30", "32", "13", "15", "48", "28", "31", "33", "34", "998", "54",
)
CURRENCY_TRANSACTION_ACTIVITY_DETAIL_CODES = CASH_IN_DETAIL_CODES + CASH_OUT_DETAIL_CODES


def validate_activity_party_code(value: str) -> str:
    """Return ``value`` if it is an allowed activity party type code."""
    return validate_code(value, ACTIVITY_PARTY_CODES, "ActivityPartyCode")


def validate_party_identification_code(value: str) -> str:
    """Return ``value`` if it is an allowed party identification type code."""
    return validate_code(value, PARTY_IDENTIFICATION_CODES, "PartyIdentificationCode")


def validate_party_name_code(value: str) -> str:
    """Return ``value`` if it is an allowed party name type code."""
    return validate_code(value, PARTY_NAME_CODES, "PartyNameCode")


def validate_federal_regulator_code(value: str) -> str:
    """Return ``value`` if it is an allowed primary federal regulator code."""
    return validate_code(value, FEDERAL_REGULATOR_CODES, "FederalRegulatorCode")


def validate_party_account_association_code(value: str) -> str:
    """Return ``value`` if it is an allowed party account association code."""
    return validate_code(
        value, PARTY_ACCOUNT_ASSOCIATION_CODES, "PartyAccountAssociationCode"
    )


def validate_currency_transaction_activity_detail_code(value: str) -> str:
    """Return ``value`` if it is an allowed cash-in or cash-out detail code."""
    return validate_code(
        value,
        CURRENCY_TRANSACTION_ACTIVITY_DETAIL_CODES,
        "CurrencyTransactionActivityDetailCodeType",
    )