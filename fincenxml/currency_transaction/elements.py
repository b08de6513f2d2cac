"""Child elements of the currency transaction report (FinCEN Report 112)."""

from __future__ import annotations

import dataclasses
from typing import Any, Callable, Optional

from fincenxml.core import (
    INDICATE_LEGAL_NAME,
    Element,
    FieldOmittedError,
    FieldRequiredError,
    MinMaxRangeError,
    ValueInvalidError,
    check_involved,
    validate_date,
    validate_indicator,
    validate_indicator_null,
    validate_restricted,
)
from fincenxml.currency_transaction.codes import (
    validate_currency_transaction_activity_detail_code,
    validate_party_account_association_code,
    validate_party_identification_code,
    validate_party_name_code,
)

PARTY_TRANSMITTER = "35"
PARTY_TRANSMITTER_CONTACT = "37"
PARTY_FINANCIAL_INSTITUTION = "30"
PARTY_CONTACT_OFFICE = "8"
PARTY_TRANSACTION_LOCATION = "34"
PARTY_PERSON_CONDUCTING = "50"
PARTY_PERSON_CONDUCTING_ANOTHER = "17"
PARTY_PERSON = "23"
PARTY_COMMON_CARRIER = "58"
PARTY_ITC_TIN = "4"
PARTY_ITC_TCC = "28"
PARTY_ITC_EIN = "2"

# Parties that are people involved in the transaction.
PERSON_PARTIES = (
    PARTY_PERSON_CONDUCTING,
    PARTY_PERSON_CONDUCTING_ANOTHER,
    PARTY_PERSON,
    PARTY_COMMON_CARRIER,
)
# Parties that may carry an address or identification.
ADDRESSED_PARTIES = (
    PARTY_TRANSMITTER,
    PARTY_FINANCIAL_INSTITUTION,
    PARTY_TRANSACTION_LOCATION,
) + PERSON_PARTIES
INSTITUTION_PARTIES = (PARTY_FINANCIAL_INSTITUTION, PARTY_TRANSACTION_LOCATION)


def _restricted(max_length: int) -> Callable[[str], str]:
    def check(value: str) -> str:
        return validate_restricted(value, max_length, f"RestrictString{max_length}")

    return check


def _value(
    tag: str,
    check: Optional[Callable[[Any], Any]] = None,
    *,
    default: Any = None,
    as_int: bool = False,
) -> Any:
    meta: dict[str, Any] = {"tag": tag}
    if check is not None:
        meta["check"] = check
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


def _omit_unless(value: Any, name: str, type_code: str, allowed: tuple[str, ...]) -> None:
    if value is not None and not check_involved(type_code, *allowed):
        raise FieldOmittedError(name)


@dataclasses.dataclass
class ActivityAssociationType(Element):
    """How this report relates to earlier filings; exactly one indicator is set."""

    xml_tag = "ActivityAssociation"

    corrects_amends_prior_report_indicator: str = _value(
        "CorrectsAmendsPriorReportIndicator", validate_indicator, default=""
    )
    fincen_direct_back_file_indicator: str = _value(
        "FinCENDirectBackFileIndicator", validate_indicator, default=""
    )
    initial_report_indicator: str = _value(
        "InitialReportIndicator", validate_indicator, default=""
    )

    def validate(self, *args: str) -> "ActivityAssociationType":
        flags = (
            self.corrects_amends_prior_report_indicator,
            self.fincen_direct_back_file_indicator,
            self.initial_report_indicator,
        )
        if sum(flag == "Y" for flag in flags) != 1:
            raise ValueInvalidError("ActivityAssociation")
        return super().validate(*args)


@dataclasses.dataclass
class PartyNameType(Element):
    """A name of a party."""

    xml_tag = "PartyName"

    entity_last_name_unknown_indicator: Optional[str] = _value(
        "EntityLastNameUnknownIndicator", validate_indicator_null
    )
    first_name_unknown_indicator: Optional[str] = _value(
        "FirstNameUnknownIndicator", validate_indicator_null
    )
    party_name_type_code: Optional[str] = _value(
        "PartyNameTypeCode", validate_party_name_code
    )
    raw_entity_individual_last_name: Optional[str] = _value(
        "RawEntityIndividualLastName", _restricted(150)
    )
    raw_individual_first_name: Optional[str] = _value(
        "RawIndividualFirstName", _restricted(35)
    )
    raw_individual_middle_name: Optional[str] = _value(
        "RawIndividualMiddleName", _restricted(35)
    )
    raw_individual_name_suffix_text: Optional[str] = _value(
        "RawIndividualNameSuffixText", _restricted(35)
    )
    raw_party_full_name: Optional[str] = _value("RawPartyFullName", _restricted(150))

    def _field_inclusion(self, type_code: str) -> None:
        _omit_unless(
            self.entity_last_name_unknown_indicator,
            "EntityLastNameUnknownIndicator", type_code, PERSON_PARTIES,
        )
        _omit_unless(
            self.first_name_unknown_indicator,
            "FirstNameUnknownIndicator", type_code, PERSON_PARTIES,
        )
        if (
            self.party_name_type_code is not None
            and self.party_name_type_code != INDICATE_LEGAL_NAME
            and not check_involved(type_code, *INSTITUTION_PARTIES, *PERSON_PARTIES)
        ):
            raise ValueInvalidError("PartyNameTypeCode")
        _omit_unless(
            self.raw_entity_individual_last_name,
            "RawEntityIndividualLastName", type_code, PERSON_PARTIES,
        )
        _omit_unless(
            self.raw_individual_first_name,
            "RawIndividualFirstName", type_code, PERSON_PARTIES,
        )
        _omit_unless(
            self.raw_individual_middle_name,
            "RawIndividualMiddleName", type_code, PERSON_PARTIES,
        )
        _omit_unless(
            self.raw_individual_name_suffix_text,
            "RawIndividualNameSuffixText", type_code, PERSON_PARTIES,
        )
        if self.raw_party_full_name is not None and check_involved(type_code, *PERSON_PARTIES):
            raise FieldOmittedError("RawPartyFullName")

    def validate(self, *args: str) -> "PartyNameType":
        if args:
            self._field_inclusion(args[0])
        return super().validate(*args)


@dataclasses.dataclass
class AddressType(Element):
    """A postal address of a party, with indicators for unknown parts."""

    xml_tag = "Address"

    city_unknown_indicator: Optional[str] = _value(
        "CityUnknownIndicator", validate_indicator_null
    )
    country_code_unknown_indicator: Optional[str] = _value(
        "CountryCodeUnknownIndicator", validate_indicator_null
    )
    raw_city_text: Optional[str] = _value("RawCityText", _restricted(50))
    raw_country_code_text: Optional[str] = _value("RawCountryCodeText", _restricted(2))
    raw_state_code_text: Optional[str] = _value("RawStateCodeText", _restricted(3))
    raw_street_address1_text: Optional[str] = _value(
        "RawStreetAddress1Text", _restricted(100)
    )
    raw_zip_code: Optional[str] = _value("RawZIPCode", _restricted(9))
    state_code_unknown_indicator: Optional[str] = _value(
        "StateCodeUnknownIndicator", validate_indicator_null
    )
    street_address_unknown_indicator: Optional[str] = _value(
        "StreetAddressUnknownIndicator", validate_indicator_null
    )
    zip_code_unknown_indicator: Optional[str] = _value(
        "ZIPCodeUnknownIndicator", validate_indicator_null
    )

    def _field_inclusion(self, type_code: str) -> None:
        rules = (
            (self.city_unknown_indicator, "CityUnknownIndicator", PERSON_PARTIES),
            (self.country_code_unknown_indicator, "CountryCodeUnknownIndicator", PERSON_PARTIES),
            (self.raw_city_text, "RawCityText", ADDRESSED_PARTIES),
            (self.raw_country_code_text, "RawCountryCodeText", ADDRESSED_PARTIES),
            (self.raw_state_code_text, "RawStateCodeText", ADDRESSED_PARTIES),
            (self.raw_street_address1_text, "RawStreetAddress1Text", ADDRESSED_PARTIES),
            (self.raw_zip_code, "RawZIPCode", ADDRESSED_PARTIES),
            (self.state_code_unknown_indicator, "StateCodeUnknownIndicator", PERSON_PARTIES),
            (self.street_address_unknown_indicator, "StreetAddressUnknownIndicator", PERSON_PARTIES),
            (self.zip_code_unknown_indicator, "ZIPCodeUnknownIndicator", PERSON_PARTIES),
        )
        for value, name, allowed in rules:
            _omit_unless(value, name, type_code, allowed)

    def validate(self, *args: str) -> "AddressType":
        if args:
            self._field_inclusion(args[0])
        return super().validate(*args)


@dataclasses.dataclass
class PhoneNumberType(Element):
    """A telephone number of a party."""

    xml_tag = "PhoneNumber"

    phone_number_extension_text: Optional[str] = _value(
        "PhoneNumberExtensionText", _restricted(6)
    )
    phone_number_text: Optional[str] = _value("PhoneNumberText", _restricted(16))

    def validate(self, *args: str) -> "PhoneNumberType":
        if args:
            type_code = args[0]
            _omit_unless(
                self.phone_number_extension_text, "PhoneNumberExtensionText",
                type_code, (PARTY_CONTACT_OFFICE,) + PERSON_PARTIES,
            )
            _omit_unless(
                self.phone_number_text, "PhoneNumberText",
                type_code, (PARTY_TRANSMITTER, PARTY_CONTACT_OFFICE) + PERSON_PARTIES,
            )
        return super().validate(*args)


@dataclasses.dataclass
class PartyIdentificationType(Element):
    """An identification number of a party."""

    xml_tag = "PartyIdentification"

    identification_present_unknown_indicator: Optional[str] = _value(
        "IdentificationPresentUnknownIndicator", validate_indicator_null
    )
    other_issuer_country_text: Optional[str] = _value(
        "OtherIssuerCountryText", _restricted(2)
    )
    other_issuer_state_text: Optional[str] = _value(
        "OtherIssuerStateText", _restricted(3)
    )
    other_party_identification_type_text: Optional[str] = _value(
        "OtherPartyIdentificationTypeText", _restricted(50)
    )
    party_identification_number_text: Optional[str] = _value(
        "PartyIdentificationNumberText", _restricted(25)
    )
    party_identification_type_code: Optional[str] = _value(
        "PartyIdentificationTypeCode", validate_party_identification_code
    )
    tin_unknown_indicator: Optional[str] = _value(
        "TINUnknownIndicator", validate_indicator_null
    )

    def _field_inclusion(self, type_code: str) -> None:
        rules = (
            (self.identification_present_unknown_indicator,
             "IdentificationPresentUnknownIndicator", PERSON_PARTIES),
            (self.other_issuer_country_text, "OtherIssuerCountryText", PERSON_PARTIES),
            (self.other_issuer_state_text, "OtherIssuerStateText", PERSON_PARTIES),
            (self.other_party_identification_type_text,
             "OtherPartyIdentificationTypeText", PERSON_PARTIES),
            (self.party_identification_number_text,
             "PartyIdentificationNumberText", ADDRESSED_PARTIES),
            (self.party_identification_type_code,
             "PartyIdentificationTypeCode", ADDRESSED_PARTIES),
            (self.tin_unknown_indicator, "TINUnknownIndicator",
             (PARTY_TRANSACTION_LOCATION,) + PERSON_PARTIES),
        )
        for value, name, allowed in rules:
            _omit_unless(value, name, type_code, allowed)

    def _check_type_code(self, type_code: str) -> None:
        code = self.party_identification_type_code
        if code is None:
            return
        if code in (PARTY_ITC_TIN, PARTY_ITC_TCC):
            allowed: tuple[str, ...] = (PARTY_TRANSMITTER,)
        elif code == PARTY_ITC_EIN:
            allowed = INSTITUTION_PARTIES + PERSON_PARTIES
        elif code in ("1", "9", "5", "6", "7", "999"):
            allowed = PERSON_PARTIES
        elif code in ("10", "11", "12", "13", "14"):
            allowed = INSTITUTION_PARTIES
        else:
            return
        if not check_involved(type_code, *allowed):
            raise ValueInvalidError("PartyIdentificationTypeCode")

    def validate(self, *args: str) -> "PartyIdentificationType":
        if args:
            self._field_inclusion(args[0])
            self._check_type_code(args[0])
        return super().validate(*args)


@dataclasses.dataclass
class OrganizationClassificationTypeSubtypeType(Element):
    """The kind of institution a party is."""

    xml_tag = "OrganizationClassificationTypeSubtype"

    organization_subtype_id: Optional[int] = _value("OrganizationSubtypeID", as_int=True)
    organization_type_id: int = _value("OrganizationTypeID", default=0, as_int=True)
    other_organization_sub_type_text: Optional[str] = _value(
        "OtherOrganizationSubTypeText", _restricted(50)
    )
    other_organization_type_text: Optional[str] = _value(
        "OtherOrganizationTypeText", _restricted(50)
    )

    def validate(self, *args: str) -> "OrganizationClassificationTypeSubtypeType":
        return super().validate(*args)


@dataclasses.dataclass
class PartyOccupationBusinessType(Element):
    """The occupation or business of a party."""

    xml_tag = "PartyOccupationBusiness"

    naics_code: Optional[str] = _value("NAICSCode", _restricted(6))
    occupation_business_text: Optional[str] = _value(
        "OccupationBusinessText", _restricted(50)
    )

    def validate(self, *args: str) -> "PartyOccupationBusinessType":
        return super().validate(*args)


@dataclasses.dataclass
class ElectronicAddressType(Element):
    """An e-mail or web address of a party."""

    xml_tag = "ElectronicAddress"

    electronic_address_text: Optional[str] = _value(
        "ElectronicAddressText", _restricted(517)
    )

    def validate(self, *args: str) -> "ElectronicAddressType":
        return super().validate(*args)


@dataclasses.dataclass
class PartyAccountAssociationType(Element):
    """Whether an account was affected by cash in or cash out."""

    xml_tag = "PartyAccountAssociation"

    party_account_association_type_code: str = _value(
        "PartyAccountAssociationTypeCode",
        validate_party_account_association_code,
        default="",
    )

    def validate(self, *args: str) -> "PartyAccountAssociationType":
        return super().validate(*args)


@dataclasses.dataclass
class AccountType(Element):
    """An account involved in the transaction."""

    xml_tag = "Account"

    account_number_text: Optional[str] = _value("AccountNumberText", _restricted(40))
    party_account_association: Optional[PartyAccountAssociationType] = _child(
        "PartyAccountAssociation", PartyAccountAssociationType
    )

    def validate(self, *args: str) -> "AccountType":
        if self.party_account_association is None:
            raise FieldRequiredError("PartyAccountAssociation")
        return super().validate(*args)


@dataclasses.dataclass
class CurrencyTransactionActivityDetailType(Element):
    """One cash-in or cash-out amount of the transaction."""

    xml_tag = "CurrencyTransactionActivityDetail"

    currency_transaction_activity_detail_type_code: str = _value(
        "CurrencyTransactionActivityDetailTypeCode",
        validate_currency_transaction_activity_detail_code,
        default="",
    )
    detail_transaction_amount_text: str = _value(
        "DetailTransactionAmountText", _restricted(15), default=""
    )
    other_currency_transaction_activity_detail_text: str = _value(
        "OtherCurrencyTransactionActivityDetailText", _restricted(50), default=""
    )
    other_foreign_currency_country_text: str = _value(
        "OtherForeignCurrencyCountryText", _restricted(2), default=""
    )

    def validate(self, *args: str) -> "CurrencyTransactionActivityDetailType":
        return super().validate(*args)


@dataclasses.dataclass
class CurrencyTransactionActivityType(Element):
    """The cash transaction with its totals and details."""

    xml_tag = "CurrencyTransactionActivity"

    aggregate_transaction_indicator: str = _value(
        "AggregateTransactionIndicator", validate_indicator, default=""
    )
    armored_car_service_indicator: str = _value(
        "ArmoredCarServiceIndicator", validate_indicator, default=""
    )
    atm_indicator: str = _value("ATMIndicator", validate_indicator, default="")
    mail_deposit_shipment_indicator: str = _value(
        "MailDepositShipmentIndicator", validate_indicator, default=""
    )
    night_deposit_indicator: str = _value(
        "NightDepositIndicator", validate_indicator, default=""
    )
    shared_branching_indicator: str = _value(
        "SharedBranchingIndicator", validate_indicator, default=""
    )
    total_cash_in_receive_amount_text: str = _value(
        "TotalCashInReceiveAmountText", _restricted(15), default=""
    )
    total_cash_out_amount_text: str = _value(
        "TotalCashOutAmountText", _restricted(15), default=""
    )
    transaction_date_text: str = _value("TransactionDateText", validate_date, default="")
    currency_transaction_activity_detail: list[
        CurrencyTransactionActivityDetailType
    ] = _children(
        "CurrencyTransactionActivityDetail", CurrencyTransactionActivityDetailType
    )

    def validate(self, *args: str) -> "CurrencyTransactionActivityType":
        if not 1 <= len(self.currency_transaction_activity_detail) <= 219:
            raise MinMaxRangeError("CurrencyTransactionActivity")
        return super().validate(*args)