"""Elements of the report of cash payments over $10,000 (FinCEN Form 8300)."""

from __future__ import annotations

import dataclasses
from collections import Counter
from typing import Any, Callable, Optional

from fincenxml.cash_payments.codes import (
    validate_activity_narrative_sequence_number,
    validate_activity_party_code,
    validate_currency_transaction_activity_detail_code,
    validate_party_identification_code,
    validate_party_name_code,
)
from fincenxml.core import (
    FORM_8300,
    INDICATE_DOING_BUSINESS,
    INDICATE_LEGAL_NAME,
    Element,
    FieldRequiredError,
    MinMaxRangeError,
    ValueInvalidError,
    check_involved,
    validate_code,
    validate_date,
    validate_indicator_null,
    validate_restricted,
)

PARTY_TRANSMITTER = "35"
PARTY_TRANSMITTER_CONTACT = "37"
PARTY_AUTHORIZED_OFFICIAL = "3"
PARTY_CONTACT_ASSISTANCE = "8"
PARTY_INDIVIDUAL = "16"
PARTY_PERSON = "23"
PARTY_BUSINESS = "4"
PARTY_ITC_TCC = "28"
PARTY_ITC_EIN = "2"

_PARTY_TYPE_CODES = ("I", "O")


def _restricted(max_length: int) -> Callable[[str], str]:
    def check(value: str) -> str:
        return validate_restricted(value, max_length, f"RestrictString{max_length}")

    return check


def _date_or_blank(value: str) -> str:
    if value == "":
        return value
    try:
        return validate_date(value)
    except ValueInvalidError:
        raise ValueInvalidError("DateYYYYMMDDOrBlankType") from None


def _party_type_code(value: str) -> str:
    return validate_code(value, _PARTY_TYPE_CODES, "PartyTypeCode")


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


@dataclasses.dataclass
class ActivityAssociationType(Element):
    """How this report relates to earlier filings."""

    xml_tag = "ActivityAssociation"

    corrects_amends_prior_report_indicator: Optional[str] = _value(
        "CorrectsAmendsPriorReportIndicator", validate_indicator_null
    )
    initial_report_indicator: Optional[str] = _value(
        "InitialReportIndicator", validate_indicator_null
    )

    def validate(self, *args: str) -> "ActivityAssociationType":
        return super().validate(*args)


@dataclasses.dataclass
class PartyNameType(Element):
    """A name of a party."""

    xml_tag = "PartyName"

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
    raw_individual_title_text: Optional[str] = _value(
        "RawIndividualTitleText", _restricted(35)
    )
    raw_party_full_name: Optional[str] = _value("RawPartyFullName", _restricted(150))

    def _field_inclusion(self, type_code: str) -> None:
        if check_involved(type_code, PARTY_TRANSMITTER, PARTY_TRANSMITTER_CONTACT):
            if self.party_name_type_code != INDICATE_LEGAL_NAME:
                raise ValueInvalidError("PartyNameTypeCode")
            if self.raw_party_full_name is None:
                raise FieldRequiredError("RawPartyFullName")
        if check_involved(type_code, PARTY_PERSON):
            if (
                self.party_name_type_code is not None
                and self.party_name_type_code != INDICATE_DOING_BUSINESS
                and self.raw_party_full_name is None
            ):
                raise FieldRequiredError("RawPartyFullName")
        if check_involved(type_code, PARTY_BUSINESS) and self.raw_party_full_name is None:
            raise FieldRequiredError("RawPartyFullName")
        if (
            check_involved(type_code, PARTY_AUTHORIZED_OFFICIAL)
            and self.raw_individual_title_text is None
        ):
            raise FieldRequiredError("RawIndividualTitleText")
        if (
            check_involved(type_code, PARTY_CONTACT_ASSISTANCE)
            and self.raw_party_full_name is None
        ):
            raise FieldRequiredError("RawPartyFullName")

    def validate(self, *args: str) -> "PartyNameType":
        if args:
            self._field_inclusion(args[0])
        return super().validate(*args)


@dataclasses.dataclass
class AddressType(Element):
    """A postal address of a party."""

    xml_tag = "Address"

    raw_city_text: Optional[str] = _value("RawCityText", _restricted(50))
    raw_country_code_text: Optional[str] = _value("RawCountryCodeText", _restricted(2))
    raw_state_code_text: Optional[str] = _value("RawStateCodeText", _restricted(3))
    raw_street_address1_text: Optional[str] = _value(
        "RawStreetAddress1Text", _restricted(100)
    )
    raw_zip_code: Optional[str] = _value("RawZIPCode", _restricted(9))

    def _field_inclusion(self, type_code: str) -> None:
        if not check_involved(type_code, PARTY_TRANSMITTER):
            return
        required = (
            ("RawCityText", self.raw_city_text),
            ("RawCountryCodeText", self.raw_country_code_text),
            ("RawStateCodeText", self.raw_state_code_text),
            ("RawStreetAddress1Text", self.raw_street_address1_text),
            ("RawZIPCode", self.raw_zip_code),
        )
        for name, value in required:
            if value is None:
                raise FieldRequiredError(name)

    def validate(self, *args: str) -> "AddressType":
        if args:
            self._field_inclusion(args[0])
        return super().validate(*args)


@dataclasses.dataclass
class PhoneNumberType(Element):
    """A telephone number of a party."""

    xml_tag = "PhoneNumber"

    phone_number_text: Optional[str] = _value("PhoneNumberText", _restricted(16))

    def validate(self, *args: str) -> "PhoneNumberType":
        if args and check_involved(args[0], PARTY_TRANSMITTER, PARTY_CONTACT_ASSISTANCE):
            if self.phone_number_text is None:
                raise FieldRequiredError("PhoneNumberText")
        return super().validate(*args)


@dataclasses.dataclass
class PartyIdentificationType(Element):
    """An identification number of a party."""

    xml_tag = "PartyIdentification"

    other_issuer_state_text: Optional[str] = _value(
        "OtherIssuerStateText", _restricted(3)
    )
    party_identification_number_text: Optional[str] = _value(
        "PartyIdentificationNumberText", _restricted(25)
    )
    party_identification_type_code: str = _value(
        "PartyIdentificationTypeCode", validate_party_identification_code, default=""
    )

    def _field_inclusion(self, type_code: str) -> None:
        if check_involved(type_code, PARTY_TRANSMITTER):
            if self.party_identification_number_text is None:
                raise FieldRequiredError("PartyIdentificationNumberText")
            if self.party_identification_type_code not in (PARTY_ITC_TCC, PARTY_ITC_EIN):
                raise ValueInvalidError("PartyIdentificationTypeCode")
        if check_involved(type_code, PARTY_BUSINESS, PARTY_PERSON, PARTY_INDIVIDUAL):
            if self.party_identification_number_text is None:
                raise FieldRequiredError("PartyIdentificationNumberText")

    def validate(self, *args: str) -> "PartyIdentificationType":
        if args:
            self._field_inclusion(args[0])
        return super().validate(*args)


@dataclasses.dataclass
class PartyOccupationBusinessType(Element):
    """The occupation or business of a party."""

    xml_tag = "PartyOccupationBusiness"

    occupation_business_text: str = _value(
        "OccupationBusinessText", _restricted(30), default=""
    )

    def validate(self, *args: str) -> "PartyOccupationBusinessType":
        return super().validate(*args)


@dataclasses.dataclass
class PartyType(Element):
    """A party of the report; its rules depend on its activity party type code."""

    xml_tag = "Party"

    activity_party_type_code: str = _value(
        "ActivityPartyTypeCode", validate_activity_party_code, default=""
    )
    individual_birth_date_text: Optional[str] = _value(
        "IndividualBirthDateText", _date_or_blank
    )
    party_type_code: Optional[str] = _value("PartyTypeCode", _party_type_code)
    party_name: list[PartyNameType] = _children("PartyName", PartyNameType)
    address: Optional[AddressType] = _child("Address", AddressType)
    phone_number: Optional[PhoneNumberType] = _child("PhoneNumber", PhoneNumberType)
    party_identification: list[PartyIdentificationType] = _children(
        "PartyIdentification", PartyIdentificationType
    )
    party_occupation_business: Optional[PartyOccupationBusinessType] = _child(
        "PartyOccupationBusiness", PartyOccupationBusinessType
    )

    def _field_inclusion(self) -> None:
        type_code = self.activity_party_type_code
        identifications = len(self.party_identification)

        if type_code == PARTY_TRANSMITTER:
            if not self.party_name:
                raise FieldRequiredError("PartyName")
            if self.address is None:
                raise FieldRequiredError("Address")
            if self.phone_number is None:
                raise FieldRequiredError("PhoneNumber")
            if identifications < 1:
                raise FieldRequiredError("PartyIdentification")
            if identifications > 1:
                raise MinMaxRangeError("PartyIdentification")

        if type_code in (PARTY_TRANSMITTER_CONTACT, PARTY_AUTHORIZED_OFFICIAL):
            if not self.party_name:
                raise FieldRequiredError("PartyName")

        if type_code == PARTY_INDIVIDUAL:
            if not self.party_name:
                raise FieldRequiredError("PartyName")
            if self.address is None:
                raise FieldRequiredError("Address")
            if identifications < 1:
                raise FieldRequiredError("PartyIdentification")
            if identifications > 2:
                raise MinMaxRangeError("PartyIdentification")

        if type_code == PARTY_PERSON:
            if self.party_type_code is None:
                raise FieldRequiredError("PartyTypeCode")
            if len(self.party_name) > 2:
                raise MinMaxRangeError("PartyName")
            if identifications > 3:
                raise MinMaxRangeError("PartyIdentification")

        if type_code == PARTY_BUSINESS:
            if not self.party_name:
                raise FieldRequiredError("PartyName")
            if identifications < 1:
                raise FieldRequiredError("PartyIdentification")
            if identifications > 2:
                raise MinMaxRangeError("PartyIdentification")

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
class CurrencyTransactionActivityDetailType(Element):
    """One form of payment received."""

    xml_tag = "CurrencyTransactionActivityDetail"

    currency_transaction_activity_detail_type_code: Optional[str] = _value(
        "CurrencyTransactionActivityDetailTypeCode",
        validate_currency_transaction_activity_detail_code,
    )
    detail_transaction_amount_text: Optional[str] = _value(
        "DetailTransactionAmountText", _restricted(15)
    )
    detail_transaction_description: str = _value(
        "DetailTransactionDescription", default="", omitempty=True
    )
    instrument_product_service_type_code: Optional[str] = _value(
        "InstrumentProductServiceTypeCode"
    )
    issuer_name_text: str = _value("IssuerNameText", default="", omitempty=True)
    other_foreign_currency_country_text: Optional[str] = _value(
        "OtherForeignCurrencyCountryText", _restricted(2)
    )

    def validate(self, *args: str) -> "CurrencyTransactionActivityDetailType":
        return super().validate(*args)


@dataclasses.dataclass
class CurrencyTransactionActivityType(Element):
    """The cash transaction with its payment details."""

    xml_tag = "CurrencyTransactionActivity"

    installment_payment_other_indicator: Optional[str] = _value(
        "InstallmentPaymentOtherIndicator", validate_indicator_null
    )
    total100_dollar_bill_in_amount_text: str = _value(
        "Total100DollarBillInAmountText", default="", omitempty=True
    )
    total_cash_in_receive_amount_text: str = _value(
        "TotalCashInReceiveAmountText", default=""
    )
    total_price_amount_text: str = _value(
        "TotalPriceAmountText", default="", omitempty=True
    )
    transaction_date_text: str = _value("TransactionDateText", validate_date, default="")
    currency_transaction_activity_detail: list[
        CurrencyTransactionActivityDetailType
    ] = _children(
        "CurrencyTransactionActivityDetail", CurrencyTransactionActivityDetailType
    )

    def validate(self, *args: str) -> "CurrencyTransactionActivityType":
        if not 2 <= len(self.currency_transaction_activity_detail) <= 9:
            raise MinMaxRangeError("CurrencyTransactionActivityDetail")
        return super().validate(*args)


@dataclasses.dataclass
class ActivityNarrativeInformationType(Element):
    """Free-text comments on the activity."""

    xml_tag = "ActivityNarrativeInformation"

    activity_narrative_sequence_number: int = _value(
        "ActivityNarrativeSequenceNumber",
        validate_activity_narrative_sequence_number,
        default=0,
        as_int=True,
    )
    activity_narrative_text: str = _value(
        "ActivityNarrativeText", _restricted(750), default=""
    )

    def validate(self, *args: str) -> "ActivityNarrativeInformationType":
        return super().validate(*args)


@dataclasses.dataclass
class ActivityType(Element):
    """A Form 8300 activity: the parties and the cash they paid."""

    xml_tag = "Activity"

    e_filing_prior_document_number: int = _value(
        "EFilingPriorDocumentNumber", default=0, omitempty=True, as_int=True
    )
    filing_date_text: str = _value("FilingDateText", validate_date, default="")
    multiple_subjects_indicator: Optional[str] = _value(
        "MultipleSubjectsIndicator", validate_indicator_null
    )
    suspicious_transaction_indicator: Optional[str] = _value(
        "SuspiciousTransactionIndicator", validate_indicator_null
    )
    transaction_on_behalf_multiple_persons_indicator: Optional[str] = _value(
        "TransactionOnBehalfMultiplePersonsIndicator", validate_indicator_null
    )
    activity_association: Optional[ActivityAssociationType] = _child(
        "ActivityAssociation", ActivityAssociationType
    )
    party: list[PartyType] = _children("Party", PartyType)
    currency_transaction_activity: Optional[CurrencyTransactionActivityType] = _child(
        "CurrencyTransactionActivity", CurrencyTransactionActivityType
    )
    activity_narrative_information: Optional[ActivityNarrativeInformationType] = _child(
        "ActivityNarrativeInformation", ActivityNarrativeInformationType
    )

    def form_type_code(self) -> str:
        """Return the form type code of this report."""
        return FORM_8300

    def total_amount(self) -> float:
        """Return the sum of all parseable detail transaction amounts."""
        if self.currency_transaction_activity is None:
            return 0.0
        amount = 0.0
        for detail in self.currency_transaction_activity.currency_transaction_activity_detail:
            if detail.detail_transaction_amount_text is None:
                continue
            try:
                amount += float(detail.detail_transaction_amount_text)
            except ValueError:
                continue
        return amount

    def party_count(self, *args: str) -> int:
        """Return how many parties have one of the given type codes."""
        return sum(
            1 for party in self.party if check_involved(party.activity_party_type_code, *args)
        )

    def validate(self, *args: str) -> "ActivityType":
        if not 4 <= len(self.party) <= 203:
            raise MinMaxRangeError("Party")
        if self.currency_transaction_activity is None:
            raise FieldRequiredError("CurrencyTransactionActivity")

        counts = Counter(party.activity_party_type_code for party in self.party)
        required = (
            (PARTY_TRANSMITTER, "Party type(transmitter)"),
            (PARTY_TRANSMITTER_CONTACT, "Party type(transmitter contact)"),
            (PARTY_AUTHORIZED_OFFICIAL, "Party type(authorized official)"),
            (PARTY_BUSINESS, "Party type(business that received cash)"),
        )
        for code, name in required:
            if counts[code] == 0:
                raise FieldRequiredError(name)
        limits = (
            (PARTY_INDIVIDUAL, 99, "Party type(individual from whom the cash was received)"),
            (PARTY_PERSON, 99, "Party type(person on whose behalf transaction conducted)"),
            (PARTY_AUTHORIZED_OFFICIAL, 1, "Party type(authorized official)"),
            (PARTY_BUSINESS, 1, "Party type(business that received cash)"),
        )
        for code, limit, name in limits:
            if counts[code] > limit:
                raise MinMaxRangeError(name)

        return super().validate(*args)


def new_activity() -> ActivityType:
    """Return an empty Form 8300 activity."""
    return ActivityType()