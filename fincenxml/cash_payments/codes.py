"""Code lists of the cash payments report (Form 8300)."""

from __future__ import annotations

from fincenxml.core import validate_code

ACTIVITY_NARRATIVE_SEQUENCE_NUMBERS = (1,)
ACTIVITY_PARTY_CODES = ("35", "37", "16", "23", "4", "8", "3")
PARTY_IDENTIFICATION_CODES = ("1", "2", "5", "6", "7", "28", "999")
PARTY_NAME_CODES = ("L", "DBA")
CURRENCY_TRANSACTION_ACTIVITY_DETAIL_CODES = (
    "1", "2", "3", "4", "5", "6", "7", "8", "9", "999",
)


def validate_activity_narrative_sequence_number(value: int) -> int:
    """Return ``value`` if it is an allowed narrative sequence number."""
    return validate_code(
        value, ACTIVITY_NARRATIVE_SEQUENCE_NUMBERS, "ActivityNarrativeSequenceNumber"
    )


def validate_activity_party_code(value: str) -> str:
    """Return ``value`` if it is an allowed activity party type code."""
    return validate_code(value, ACTIVITY_PARTY_CODES, "ActivityPartyCode")


def validate_party_identification_code(value: str) -> str:
    """Return ``value`` if it is an allowed party identification type code."""
    return validate_code(value, PARTY_IDENTIFICATION_CODES, "PartyIdentificationCode")


def validate_party_name_code(value: str) -> str:
    """Return ``value`` if it is an allowed party name type code."""
    return validate_code(value, PARTY_NAME_CODES, "PartyNameCode")


def validate_currency_transaction_activity_detail_code(value: str) -> str:
    """Return ``value`` if it is an allowed transaction detail type code."""
    return validate_code(
        value,
        CURRENCY_TRANSACTION_ACTIVITY_DETAIL_CODES,
        "CurrencyTransactionActivityDetailCodeType",
    )