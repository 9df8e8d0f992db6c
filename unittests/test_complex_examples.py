from dataclasses import dataclass
from typing import Any, Optional

from frozendict import frozendict

from fieldvalidators import (
    ValidationResult,
    combine_validators,
    compose_validators,
    create_validator,
    has_error_only_at,
    has_length_between,
    is_alpha_numeric,
    is_of_type,
    is_required,
    is_required_if,
)


def _iban_predicate(message: str):
    def predicate(value: Any) -> Optional[str]:
        if value is None:
            return None
        if not value[:2].isalpha() or not value[2:].isnumeric():
            return message
        return None

    return predicate


is_iban = create_validator(_iban_predicate, lambda field: f"{field} is not a valid IBAN")


class TestComplexExamples:
    def test_sepa_customer(self):
        @dataclass(frozen=True)
        class BankingData:
            iban: Optional[str]
            sepa_zahler: bool

        @dataclass(frozen=True)
        class Customer:
            name: str
            age: int
            contracts: tuple[BankingData, ...]
            address: frozendict[str, str]

        validate_iban = compose_validators(
            is_alpha_numeric, has_length_between(15, 34), is_iban({"message": "IBAN has an invalid format"})
        )
        validate_customer = combine_validators(
            {
                "name": is_required("Name"),
                "age": is_of_type(int)("Age"),
                "contracts[]": {
                    "iban": compose_validators(
                        is_required_if(lambda banking_data: banking_data.sepa_zahler), validate_iban
                    )("IBAN"),
                },
                "address.city": is_required("City"),
            }
        )

        data = Customer(
            name="John Doe",
            age=42,
            contracts=(
                BankingData(iban="DE52940594210000082271", sepa_zahler=True),
                BankingData(iban="DEA9370400440532013000", sepa_zahler=True),
                BankingData(iban=None, sepa_zahler=True),
                BankingData(iban=None, sepa_zahler=False),
            ),
            address=frozendict({"city": "Köln"}),
        )
        errors = validate_customer(data)
        assert errors == {
            "contracts": [None, {"iban": "IBAN has an invalid format"}, {"iban": "IBAN is required"}, None]
        }
        assert has_error_only_at(errors, "contracts")
        result = ValidationResult(errors)
        assert result.num_errors_total == 2
        assert result.num_errors_per_field == {"contracts": 2}
