"""The activity and party elements of the currency transaction report (FinCEN Report 112)."""

from __future__ import annotations

import dataclasses
from collections import Counter
from typing import Any, Callable, Optional

from fincenxml.core import (
    REPORT_112,
    Element,
    FieldOmittedError,
    FieldRequiredError,
    MinMaxRangeError,
    ValueInvalidError,
    validate_date,
    validate_indicator_null,
    validate_restricted,
)
from fincenxml.currency_transaction.codes import (
    validate_activity_party_code,
    validate_federal_regulator_code,
)
from fincenxml.currency_transaction.elements import (
    ADDRESSED_PARTIES,
    INSTITUTION_PARTIES,
    PARTY_COMMON_CARRIER,
    PARTY_CONTACT_OFFICE,
    PARTY_FINANCIAL_INSTITUTION,
    PARTY_PERSON,
    PARTY_PERSON_CONDUCTING,
    PARTY_TRANSACTION_LOCATION,
    PARTY_TRANSMITTER,
    PARTY_TRANSMITTER_CONTACT,
    PERSON_PARTIES,
    AccountType,
    ActivityAssociationType,
    AddressType,
    CurrencyTransactionActivityType,
    ElectronicAddressType,
    OrganizationClassificationTypeSubtypeType,
    PartyIdentificationType,
    PartyNameType,
    PartyOccupationBusinessType,
    PhoneNumberType,
)

_TRANSMITTER_PARTIES = (PARTY_TRANSMITTER, PARTY_TRANSMITTER_CONTACT)
_CASH_AMOUNT_PARTIES = (PARTY_TRANSACTION_LOCATION,) + PERSON_PARTIES
_ENTITY_PARTIES = (PARTY_PERSON, PARTY_COMMON_CARRIER)
_PHONE_PARTIES = (PARTY_TRANSMITTER, PARTY_CONTACT_OFFICE) + PERSON_PARTIES


def _restricted(max_length: int) -> Callable[[str], str]:
    def check(value: str) -> str:
        return validate_restricted(value, max_length, f"RestrictString{max_length}")

    return check


def _date_or_blank_dob(value: str) -> str:
    if value == "":
        return value
    try:
        return validate_date(value)
    except ValueInvalidError:
        raise ValueInvalidError("DateYYYYMMDDOrBlankTypeDOB") from None


def _value(
    tag: str,
    check: Optional[Callable[[Any], Any]] = None,
    *,
    default: Any = None,
    omitempty: bool = False,
    as_int: bool = False,
) -> Any:
    meta: dict[str, Any] = {"tag": tag}
    if check is not None:
        meta["check"] = check
    if omitempty:
        meta["omitempty"] = True
    if as_int:
        meta["type"] = int
    return dataclasses.field(default=default, metadata=meta)


def _child(tag: str, element_type: type) -> Any:
    return dataclasses.field(default=None, metadata={"tag": tag, "element": element_type})


def _children(tag: str, element_type: type) -> Any:
    return dataclasses.field(
        default_factory=list,
        metadata={"tag": tag, "element": element_type, "many": True},
    )


def _indicator(tag: str) -> Any:
    return _value(tag, validate_indicator_null)


@dataclasses.dataclass
class PartyType(Element):
    """A party of the report; which fields it may carry depends on its type code."""

    xml_tag = "Party"

    activity_party_type_code: str = _value(
        "ActivityPartyTypeCode", validate_activity_party_code, default=""
    )
    birth_date_unknown_indicator: Optional[str] = _indicator("BirthDateUnknownIndicator")
    e_filing_coverage_beginning_date_text: Optional[str] = _value(
        "EFilingCoverageBeginningDateText", validate_date
    )
    e_filing_coverage_end_date_text: Optional[str] = _value(
        "EFilingCoverageEndDateText", validate_date
    )
    female_gender_indicator: Optional[str] = _indicator("FemaleGenderIndicator")
    individual_birth_date_text: Optional[str] = _value(
        "IndividualBirthDateText", _date_or_blank_dob
    )
    individual_entity_cash_in_amount_text: Optional[str] = _value(
        "IndividualEntityCashInAmountText", _restricted(15)
    )
    individual_entity_cash_out_amount_text: Optional[str] = _value(
        "IndividualEntityCashOutAmountText", _restricted(15)
    )
    male_gender_indicator: Optional[str] = _indicator("MaleGenderIndicator")
    multiple_transactions_persons_individuals_indicator: Optional[str] = _indicator(
        "MultipleTransactionsPersonsIndividualsIndicator"
    )
    party_as_entity_organization_indicator: Optional[str] = _indicator(
        "PartyAsEntityOrganizationIndicator"
    )
    primary_regulator_type_code: Optional[str] = _value(
        "PrimaryRegulatorTypeCode", validate_federal_regulator_code
    )
    unknown_gender_indicator: Optional[str] = _indicator("UnknownGenderIndicator")
    party_name: list[PartyNameType] = _children("PartyName", PartyNameType)
    address: Optional[AddressType] = _child("Address", AddressType)
    phone_number: Optional[PhoneNumberType] = _child("PhoneNumber", PhoneNumberType)
    party_identification: list[PartyIdentificationType] = _children(
        "PartyIdentification", PartyIdentificationType
    )
    organization_classification_type_subtype: Optional[
        OrganizationClassificationTypeSubtypeType
    ] = _child(
        "OrganizationClassificationTypeSubtype", OrganizationClassificationTypeSubtypeType
    )
    party_occupation_business: Optional[PartyOccupationBusinessType] = _child(
        "PartyOccupationBusiness", PartyOccupationBusinessType
    )
    electronic_address: Optional[ElectronicAddressType] = _child(
        "ElectronicAddress", ElectronicAddressType
    )
    account: list[AccountType] = _children("Account", AccountType)

    def _omit_unless(self, value: Any, name: str, allowed: tuple[str, ...]) -> None:
        if value is not None and self.activity_party_type_code not in allowed:
            raise FieldOmittedError(name)

    def _field_inclusion(self) -> None:
        leading = (
            (self.birth_date_unknown_indicator, "BirthDateUnknownIndicator", PERSON_PARTIES),
            (self.e_filing_coverage_beginning_date_text,
             "EFilingCoverageBeginningDateText", _TRANSMITTER_PARTIES),
            (self.e_filing_coverage_end_date_text,
             "EFilingCoverageEndDateText", _TRANSMITTER_PARTIES),
            (self.female_gender_indicator, "FemaleGenderIndicator", PERSON_PARTIES),
            (self.individual_birth_date_text, "IndividualBirthDateText", PERSON_PARTIES),
            (self.individual_entity_cash_in_amount_text,
             "IndividualEntityCashInAmountText", _CASH_AMOUNT_PARTIES),
            (self.individual_entity_cash_out_amount_text,
             "IndividualEntityCashOutAmountText", _CASH_AMOUNT_PARTIES),
            (self.male_gender_indicator, "MaleGenderIndicator", PERSON_PARTIES),
            (self.multiple_transactions_persons_individuals_indicator,
             "MultipleTransactionsPersonsIndividualsIndicator", PERSON_PARTIES),
            (self.party_as_entity_organization_indicator,
             "PartyAsEntityOrganizationIndicator", _ENTITY_PARTIES),
            (self.primary_regulator_type_code, "PrimaryRegulatorTypeCode", INSTITUTION_PARTIES),
            (self.unknown_gender_indicator, "UnknownGenderIndicator", PERSON_PARTIES),
        )
        for value, name, allowed in leading:
            self._omit_unless(value, name, allowed)

        if not 1 <= len(self.party_name) <= 2:
            raise MinMaxRangeError("PartyName")

        self._omit_unless(self.address, "Address", ADDRESSED_PARTIES)
        self._omit_unless(self.phone_number, "PhoneNumber", _PHONE_PARTIES)
        self._omit_unless(
            self.party_identification or None, "PartyIdentification", ADDRESSED_PARTIES
        )
        if len(self.party_identification) > 2:
            raise MinMaxRangeError("PartyIdentification")
        self._omit_unless(
            self.organization_classification_type_subtype,
            "OrganizationClassificationTypeSubtype",
            INSTITUTION_PARTIES,
        )
        self._omit_unless(
            self.party_occupation_business, "PartyOccupationBusiness", PERSON_PARTIES
        )
        self._omit_unless(self.electronic_address, "ElectronicAddress", PERSON_PARTIES)
        if len(self.account) > 198:
            raise MinMaxRangeError("Account")
        self._omit_unless(self.account or None, "Account", PERSON_PARTIES)

    def validate(self, *args: str) -> "PartyType":
        """Validate against this party's own type code; ``args`` are ignored."""
        self._field_inclusion()
        type_code = self.activity_party_type_code
        for f in self._xml_fields():
            value = getattr(self, f.name)
            if value is None:
                continue
            if f.metadata.get("many"):
                for item in value:
                    if item is not None:
                        item.validate()
            elif isinstance(value, Element):
                value.validate(type_code)
            else:
                check = f.metadata.get("check")
                if check is not None:
                    check(value)
        return self


@dataclasses.dataclass
class ActivityType(Element):
    """A currency transaction report activity: its parties and the cash moved."""

    xml_tag = "Activity"

    e_filing_prior_document_number: int = _value(
        "EFilingPriorDocumentNumber", default=0, omitempty=True, as_int=True
    )
    filing_date_text: str = _value("FilingDateText", validate_date, default="")
    activity_association: Optional[ActivityAssociationType] = _child(
        "ActivityAssociation", ActivityAssociationType
    )
    party: list[PartyType] = _children("Party", PartyType)
    currency_transaction_activity: Optional[CurrencyTransactionActivityType] = _child(
        "CurrencyTransactionActivity", CurrencyTransactionActivityType
    )

    def form_type_code(self) -> str:
        """Return the form type code of this report."""
        return REPORT_112

    def total_amount(self) -> float:
        """Return the sum of all parseable detail transaction amounts."""
        if self.currency_transaction_activity is None:
            return 0.0
        amount = 0.0
        for detail in self.currency_transaction_activity.currency_transaction_activity_detail:
            try:
                amount += float(detail.detail_transaction_amount_text)
            except ValueError:
                continue
        return amount

    def party_count(self, *args: str) -> int:
        """Return the number of parties; ``args`` are ignored."""
        return len(self.party)

    def validate(self, *args: str) -> "ActivityType":
        if not 6 <= len(self.party) <= 2002:
            raise MinMaxRangeError("Party")
        if self.activity_association is None:
            raise FieldRequiredError("ActivityAssociation")
        if self.currency_transaction_activity is None:
            raise FieldRequiredError("CurrencyTransactionActivity")

        counts = Counter(party.activity_party_type_code for party in self.party)
        required = (
            (PARTY_TRANSMITTER, "Party type(transmitter)"),
            (PARTY_TRANSMITTER_CONTACT, "Party type(transmitter contact)"),
            (PARTY_FINANCIAL_INSTITUTION, "Party type(reporting financial institution)"),
            (PARTY_CONTACT_OFFICE, "Party type(report contact office)"),
        )
        for code, name in required:
            if counts[code] == 0:
                raise FieldRequiredError(name)
        limits = (
            (PARTY_TRANSACTION_LOCATION, "Party type(transaction location)"),
            (PARTY_PERSON_CONDUCTING, "Party type(person conducting on own behalf)"),
        )
        for code, name in limits:
            if counts[code] > 999:
                raise MinMaxRangeError(name)

        return super().validate(*args)


def new_activity() -> ActivityType:
    """Return an empty currency transaction report activity."""
    return ActivityType()