import pytest

from fincenxml.core import (
    FieldOmittedError,
    FieldRequiredError,
    MinMaxRangeError,
    ValueInvalidError,
)
from fincenxml.currency_transaction.elements import (
    PARTY_CONTACT_OFFICE,
    PARTY_FINANCIAL_INSTITUTION,
    PARTY_PERSON_CONDUCTING,
    PARTY_TRANSMITTER,
    AccountType,
    ActivityAssociationType,
    AddressType,
    CurrencyTransactionActivityDetailType,
    CurrencyTransactionActivityType,
    ElectronicAddressType,
    OrganizationClassificationTypeSubtypeType,
    PartyAccountAssociationType,
    PartyIdentificationType,
    PartyNameType,
    PartyOccupationBusinessType,
    PhoneNumberType,
)


def _message(error_type, call, *args):
    with pytest.raises(error_type) as info:
        call(*args)
    return str(info.value)


PARTY_NAME_XML = (
    '<PartyName SeqNum="29">\n'
    "\t<PartyNameTypeCode>L</PartyNameTypeCode>\n"
    "\t<RawEntityIndividualLastName>Doe</RawEntityIndividualLastName>\n"
    "\t<RawIndividualFirstName>John</RawIndividualFirstName>\n"
    "\t<RawIndividualMiddleName>Johnson</RawIndividualMiddleName>\n"
    "\t<RawIndividualNameSuffixText>Jr.</RawIndividualNameSuffixText>\n"
    "</PartyName>"
)

ADDRESS_XML = (
    '<Address SeqNum="31">\n'
    "\t<RawCityText>Vienna</RawCityText>\n"
    "\t<RawCountryCodeText>US</RawCountryCodeText>\n"
    "\t<RawStateCodeText>VA</RawStateCodeText>\n"
    "\t<StreetAddressUnknownIndicator>Y</StreetAddressUnknownIndicator>\n"
    "\t<ZIPCodeUnknownIndicator>Y</ZIPCodeUnknownIndicator>\n"
    "</Address>"
)

PHONE_XML = (
    '<PhoneNumber SeqNum="20">\n'
    "\t<PhoneNumberExtensionText>2210</PhoneNumberExtensionText>\n"
    "\t<PhoneNumberText>PHONE-TEXT</PhoneNumberText>\n"
    "</PhoneNumber>"
)

IDENTIFICATION_XML = (
    '<PartyIdentification SeqNum="34">\n'
    "\t<OtherIssuerCountryText>US</OtherIssuerCountryText>\n"
    "\t<OtherIssuerStateText>TX</OtherIssuerStateText>\n"
    "\t<PartyIdentificationNumberText>ID-EXAMPLE-1</PartyIdentificationNumberText>\n"
    "\t<PartyIdentificationTypeCode>5</PartyIdentificationTypeCode>\n"
    "</PartyIdentification>"
)

ORGANIZATION_XML = (
    '<OrganizationClassificationTypeSubtype SeqNum="27">\n'
    "\t<OrganizationSubtypeID>1999</OrganizationSubtypeID>\n"
    "\t<OrganizationTypeID>1</OrganizationTypeID>\n"
    "\t<OtherOrganizationSubTypeText>Other casino</OtherOrganizationSubTypeText>\n"
    "</OrganizationClassificationTypeSubtype>"
)

ACCOUNT_XML = (
    '<Account SeqNum="37">\n'
    "\t<AccountNumberText>ACCT-EXAMPLE-1</AccountNumberText>\n"
    '\t<PartyAccountAssociation SeqNum="38">\n'
    "\t\t<PartyAccountAssociationTypeCode>8</PartyAccountAssociationTypeCode>\n"
    "\t</PartyAccountAssociation>\n"
    "</Account>"
)

OCCUPATION_XML = (
    '<PartyOccupationBusiness SeqNum="35">\n'
    "\t<NAICSCode>6214</NAICSCode>\n"
    "\t<OccupationBusinessText>Outpatient Care Centers</OccupationBusinessText>\n"
    "</PartyOccupationBusiness>"
)

ELECTRONIC_XML = (
    '<ElectronicAddress SeqNum="36">\n'
    "\t<ElectronicAddressText>[email]</ElectronicAddressText>\n"
    "</ElectronicAddress>"
)


def test_party_name_parse_and_round_trip():
    name = PartyNameType.from_xml(PARTY_NAME_XML)
    assert name.seq_num == 29
    assert name.party_name_type_code == "L"
    assert name.raw_entity_individual_last_name == "Doe"
    assert name.raw_individual_first_name == "John"
    assert name.raw_individual_middle_name == "Johnson"
    assert name.raw_individual_name_suffix_text == "Jr."
    assert name.to_xml() == PARTY_NAME_XML
    assert name.validate(PARTY_PERSON_CONDUCTING) is name


def test_address_parse_and_round_trip():
    address = AddressType.from_xml(ADDRESS_XML)
    assert address.seq_num == 31
    assert address.raw_city_text == "Vienna"
    assert address.raw_country_code_text == "US"
    assert address.raw_state_code_text == "VA"
    assert address.street_address_unknown_indicator == "Y"
    assert address.zip_code_unknown_indicator == "Y"
    assert address.to_xml() == ADDRESS_XML
    assert address.validate(PARTY_PERSON_CONDUCTING) is address


def test_phone_number_parse_and_round_trip():
    phone = PhoneNumberType.from_xml(PHONE_XML)
    assert phone.seq_num == 20
    assert phone.phone_number_extension_text == "2210"
    assert phone.phone_number_text == "PHONE-TEXT"
    assert phone.to_xml() == PHONE_XML
    assert phone.validate(PARTY_CONTACT_OFFICE) is phone


def test_party_identification_parse_and_round_trip():
    identification = PartyIdentificationType.from_xml(IDENTIFICATION_XML)
    assert identification.seq_num == 34
    assert identification.other_issuer_country_text == "US"
    assert identification.other_issuer_state_text == "TX"
    assert identification.party_identification_type_code == "5"
    assert identification.to_xml() == IDENTIFICATION_XML
    assert identification.validate(PARTY_PERSON_CONDUCTING) is identification


def test_organization_classification_round_trip():
    org = OrganizationClassificationTypeSubtypeType.from_xml(ORGANIZATION_XML)
    assert org.seq_num == 27
    assert org.organization_subtype_id == 1999
    assert org.organization_type_id == 1
    assert org.other_organization_sub_type_text == "Other casino"
    assert org.to_xml() == ORGANIZATION_XML


def test_account_round_trip():
    account = AccountType.from_xml(ACCOUNT_XML)
    assert account.seq_num == 37
    assert account.account_number_text == "ACCT-EXAMPLE-1"
    assert account.party_account_association.seq_num == 38
    assert account.party_account_association.party_account_association_type_code == "8"
    assert account.to_xml() == ACCOUNT_XML
    assert account.validate() is account


def test_occupation_and_electronic_address_round_trip():
    business = PartyOccupationBusinessType.from_xml(OCCUPATION_XML)
    assert business.naics_code == "6214"
    assert business.occupation_business_text == "Outpatient Care Centers"
    assert business.to_xml() == OCCUPATION_XML

    electronic = ElectronicAddressType.from_xml(ELECTRONIC_XML)
    assert electronic.electronic_address_text == "[email]"
    assert electronic.to_xml() == ELECTRONIC_XML


def test_activity_association():
    sample = ActivityAssociationType()
    assert _message(ValueInvalidError, sample.validate) == (
        "The ActivityAssociation has invalid value"
    )
    sample.corrects_amends_prior_report_indicator = "Y"
    sample.fincen_direct_back_file_indicator = "Y"
    sample.initial_report_indicator = "Y"
    assert _message(ValueInvalidError, sample.validate) == (
        "The ActivityAssociation has invalid value"
    )
    only_initial = ActivityAssociationType(initial_report_indicator="Y")
    assert only_initial.validate() is only_initial


def test_party_name_rules():
    sample = PartyNameType()
    assert sample.validate() is sample
    assert sample.validate("INVALID") is sample

    sample.entity_last_name_unknown_indicator = "Y"
    assert _message(FieldOmittedError, sample.validate, "INVALID") == (
        "The EntityLastNameUnknownIndicator should be omitted"
    )
    sample.entity_last_name_unknown_indicator = None
    sample.first_name_unknown_indicator = "Y"
    assert _message(FieldOmittedError, sample.validate, "INVALID") == (
        "The FirstNameUnknownIndicator should be omitted"
    )
    sample.first_name_unknown_indicator = None
    sample.party_name_type_code = "DBA"
    assert _message(ValueInvalidError, sample.validate, "INVALID") == (
        "The PartyNameTypeCode has invalid value"
    )
    sample.party_name_type_code = None
    sample.raw_entity_individual_last_name = "SA"
    assert _message(FieldOmittedError, sample.validate, "INVALID") == (
        "The RawEntityIndividualLastName should be omitted"
    )
    sample.raw_entity_individual_last_name = None
    sample.raw_individual_first_name = "SA"
    assert _message(FieldOmittedError, sample.validate, "INVALID") == (
        "The RawIndividualFirstName should be omitted"
    )
    sample.raw_individual_first_name = None
    sample.raw_individual_middle_name = "SA"
    assert _message(FieldOmittedError, sample.validate, "INVALID") == (
        "The RawIndividualMiddleName should be omitted"
    )
    sample.raw_individual_middle_name = None
    sample.raw_individual_name_suffix_text = "SA"
    assert _message(FieldOmittedError, sample.validate, "INVALID") == (
        "The RawIndividualNameSuffixText should be omitted"
    )
    sample.raw_individual_name_suffix_text = None
    sample.raw_party_full_name = "SA"
    assert _message(FieldOmittedError, sample.validate, PARTY_PERSON_CONDUCTING) == (
        "The RawPartyFullName should be omitted"
    )


@pytest.mark.parametrize(
    "attribute, value, name",
    [
        ("city_unknown_indicator", "Y", "CityUnknownIndicator"),
        ("country_code_unknown_indicator", "Y", "CountryCodeUnknownIndicator"),
        ("raw_city_text", "SA", "RawCityText"),
        ("raw_country_code_text", "SA", "RawCountryCodeText"),
        ("raw_state_code_text", "SA", "RawStateCodeText"),
        ("raw_street_address1_text", "SA", "RawStreetAddress1Text"),
        ("raw_zip_code", "SA", "RawZIPCode"),
        ("state_code_unknown_indicator", "Y", "StateCodeUnknownIndicator"),
        ("street_address_unknown_indicator", "Y", "StreetAddressUnknownIndicator"),
        ("zip_code_unknown_indicator", "Y", "ZIPCodeUnknownIndicator"),
    ],
)
def test_address_omitted_fields(attribute, value, name):
    sample = AddressType()
    assert sample.validate("INVALID") is sample
    setattr(sample, attribute, value)
    assert _message(FieldOmittedError, sample.validate, "INVALID") == (
        f"The {name} should be omitted"
    )


def test_phone_number_rules():
    sample = PhoneNumberType()
    assert sample.validate() is sample
    assert sample.validate("INVALID") is sample

    sample.phone_number_extension_text = "SA"
    assert _message(FieldOmittedError, sample.validate, "INVALID") == (
        "The PhoneNumberExtensionText should be omitted"
    )
    sample.phone_number_extension_text = None
    sample.phone_number_text = "SA"
    assert _message(FieldOmittedError, sample.validate, "INVALID") == (
        "The PhoneNumberText should be omitted"
    )
    assert sample.validate(PARTY_TRANSMITTER) is sample


@pytest.mark.parametrize(
    "attribute, value, name",
    [
        ("identification_present_unknown_indicator", "Y",
         "IdentificationPresentUnknownIndicator"),
        ("other_issuer_country_text", "SA", "OtherIssuerCountryText"),
        ("other_issuer_state_text", "SA", "OtherIssuerStateText"),
        ("other_party_identification_type_text", "SA", "OtherPartyIdentificationTypeText"),
        ("party_identification_number_text", "SA", "PartyIdentificationNumberText"),
        ("party_identification_type_code", "1", "PartyIdentificationTypeCode"),
        ("tin_unknown_indicator", "Y", "TINUnknownIndicator"),
    ],
)
def test_party_identification_omitted_fields(attribute, value, name):
    sample = PartyIdentificationType()
    assert sample.validate() is sample
    assert sample.validate("INVALID") is sample
    setattr(sample, attribute, value)
    assert _message(FieldOmittedError, sample.validate, "INVALID") == (
        f"The {name} should be omitted"
    )


@pytest.mark.parametrize(
    "code, party, ok",
    [
        ("4", PARTY_TRANSMITTER, True),
        ("28", PARTY_TRANSMITTER, True),
        ("28", PARTY_FINANCIAL_INSTITUTION, False),
        ("2", PARTY_FINANCIAL_INSTITUTION, True),
        ("2", PARTY_TRANSMITTER, False),
        ("1", PARTY_PERSON_CONDUCTING, True),
        ("1", PARTY_FINANCIAL_INSTITUTION, False),
        ("10", PARTY_FINANCIAL_INSTITUTION, True),
        ("10", PARTY_PERSON_CONDUCTING, False),
    ],
)
def test_party_identification_type_code_per_party(code, party, ok):
    sample = PartyIdentificationType(party_identification_type_code=code)
    if ok:
        assert sample.validate(party) is sample
    else:
        assert _message(ValueInvalidError, sample.validate, party) == (
            "The PartyIdentificationTypeCode has invalid value"
        )


def test_party_identification_rejects_unknown_code():
    sample = PartyIdentificationType(party_identification_type_code="3")
    assert _message(ValueInvalidError, sample.validate) == (
        "The PartyIdentificationCode has invalid value"
    )


def test_account_requires_association():
    assert _message(FieldRequiredError, AccountType().validate) == (
        "The PartyAccountAssociation is a required field"
    )
    account = AccountType(party_account_association=PartyAccountAssociationType())
    assert _message(ValueInvalidError, account.validate) == (
        "The PartyAccountAssociationCode has invalid value"
    )


def test_restricted_length_is_checked():
    account = AccountType(
        account_number_text="A" * 41,
        party_account_association=PartyAccountAssociationType(
            party_account_association_type_code="9"
        ),
    )
    assert _message(ValueInvalidError, account.validate) == (
        "The RestrictString40 has invalid value"
    )


def test_currency_transaction_activity_detail_range():
    sample = CurrencyTransactionActivityType()
    assert _message(MinMaxRangeError, sample.validate) == (
        "The CurrencyTransactionActivity has invalid min & max range"
    )
    sample.currency_transaction_activity_detail = [
        CurrencyTransactionActivityDetailType() for _ in range(220)
    ]
    assert _message(MinMaxRangeError, sample.validate) == (
        "The CurrencyTransactionActivity has invalid min & max range"
    )


def test_currency_transaction_activity_checks_date_and_details():
    detail = CurrencyTransactionActivityDetailType(
        currency_transaction_activity_detail_type_code="55",
        detail_transaction_amount_text="15000",
    )
    sample = CurrencyTransactionActivityType(currency_transaction_activity_detail=[detail])
    assert _message(ValueInvalidError, sample.validate) == (
        "The DateYYYYMMDDType has invalid value"
    )
    sample.transaction_date_text = "20170115"
    assert sample.validate() is sample

    detail.currency_transaction_activity_detail_type_code = "1"
    assert _message(ValueInvalidError, sample.validate) == (
        "The CurrencyTransactionActivityDetailCodeType has invalid value"
    )


def test_currency_transaction_activity_detail_serialises_every_field():
    detail = CurrencyTransactionActivityDetailType(
        seq_num=5,
        currency_transaction_activity_detail_type_code="55",
        detail_transaction_amount_text="15000",
    )
    expected = (
        '<CurrencyTransactionActivityDetail SeqNum="5">\n'
        "\t<CurrencyTransactionActivityDetailTypeCode>55"
        "</CurrencyTransactionActivityDetailTypeCode>\n"
        "\t<DetailTransactionAmountText>15000</DetailTransactionAmountText>\n"
        "\t<OtherCurrencyTransactionActivityDetailText>"
        "</OtherCurrencyTransactionActivityDetailText>\n"
        "\t<OtherForeignCurrencyCountryText></OtherForeignCurrencyCountryText>\n"
        "</CurrencyTransactionActivityDetail>"
    )
    assert detail.to_xml() == expected
    assert CurrencyTransactionActivityDetailType.from_xml(expected) == detail