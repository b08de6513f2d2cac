# fincenxml

Data models for the activity part of two FinCEN e-filing reports. It covers
reading them from XML and writing them back, and the field-inclusion and
value rules that the reports enforce:

- **Form 8300**: report of cash payments over $10,000 received in a trade
  or business (`fincenxml.cash_payments`)
- **Report 112**: Currency Transaction Report, CTR
  (`fincenxml.currency_transaction`)

It has no dependencies outside the standard library.

## Installation

```
pip install fincenxml
```

## Reading, writing and validating an element

Every element is a dataclass deriving from `fincenxml.core.Element`. Read one
from XML text with the class method `from_xml`. Write it back as tab-indented
XML with `to_xml`, which returns a `str`. Check it with `validate`. When a rule
is broken, `validate` raises a `fincenxml.core.FincenError` subclass. When the
element is valid, it returns the element itself.

```python
from fincenxml.cash_payments.activity import PartyType

sample = """<Party SeqNum="10">
\t<ActivityPartyTypeCode>37</ActivityPartyTypeCode>
\t<PartyName SeqNum="11">
\t\t<PartyNameTypeCode>L</PartyNameTypeCode>
\t\t<RawPartyFullName>Transmitter contact legal name</RawPartyFullName>
\t</PartyName>
</Party>"""

party = PartyType.from_xml(sample)
party.validate()
assert party.to_xml() == sample
```

`from_xml` raises `ValueError` when the root tag does not match the class.

## Building an activity

```python
from fincenxml.currency_transaction.activity import new_activity
from fincenxml.core import MinMaxRangeError

activity = new_activity()
print(activity.form_type_code())        # "CTRX"

try:
    activity.validate()
except MinMaxRangeError as err:
    print(err)                          # The Party has invalid min & max range
```

Each report has an `ActivityType` with these methods:

- `form_type_code()` returns `"8300X"` for Form 8300 and `"CTRX"` for the CTR.
- `total_amount()` adds up the detail transaction amounts that parse as
  numbers.
- `party_count(*codes)` counts parties. For Form 8300 it counts only the
  parties whose activity party type code is among `codes`. For the CTR it
  returns the number of all parties and ignores `codes`.

`PartyType.validate()` checks a party and its children against the party's
own `activity_party_type_code`.

## Errors

All validation failures derive from `fincenxml.core.FincenError`, a
`ValueError`. The `field` attribute of each error names what failed.

| Exception | Message shape |
|---|---|
| `FieldRequiredError` | `The <field> is a required field` |
| `MinMaxRangeError` | `The <field> has invalid min & max range` |
| `ValueInvalidError` | `The <field> has invalid value` |
| `FieldOmittedError` | `The <field> should be omitted` |

## Code lists and value checks

The permitted codes for each report are in `fincenxml.cash_payments.codes`
and `fincenxml.currency_transaction.codes`. Examples are
`validate_party_name_code("L")` and `validate_federal_regulator_code("9")`.
Each check returns the value when it is allowed and raises
`ValueInvalidError` otherwise.

`fincenxml.core` also provides general checks:

- `validate_date` for YYYYMMDD dates
- `validate_indicator` and `validate_indicator_null` for `"Y"` or blank
- `validate_restricted` for maximum lengths
- `validate_code`
- `check_involved`

## What it does not do

The package models the `Activity` element and everything below it. It does
not provide these:

- the batch file envelope that wraps activities for submission
- a command-line tool
- an HTTP service

## Running the tests

```
pip install -e .[test]
pytest
```