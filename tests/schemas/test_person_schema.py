"""PersonIn — field rules for create and full update.

Invariants:
    - nombre non-blank string
    - edad integer >= 0 (JSON integer or integer string; no bools, no decimals)
    - correo optional, syntactically valid when present
"""

import pytest
from pydantic import ValidationError

from app.core.validation import collect_violations
from app.schemas.person import PersonIn


def _paths(violations):
    return [v["path"] for v in violations]


def test_valid_person_without_correo():
    person = PersonIn.model_validate({"nombre": "Ana", "edad": 30})
    assert person.correo is None


def test_age_zero_is_accepted():
    assert PersonIn.model_validate({"nombre": "Bebé", "edad": 0}).edad == 0


@pytest.mark.parametrize("edad, expected", [("27", 27), ("+3", 3), ("0", 0)])
def test_integer_strings_become_ints(edad, expected):
    assert PersonIn.model_validate({"nombre": "Ana", "edad": edad}).edad == expected


@pytest.mark.parametrize("nombre", ["", "   ", None, 7])
def test_bad_name_names_nombre(nombre):
    violations = collect_violations(PersonIn, {"nombre": nombre, "edad": 30})
    assert _paths(violations) == ["nombre"]
    assert violations[0]["msg"] == "El nombre es obligatorio"


@pytest.mark.parametrize("edad", [-1, "-1", 30.5, 3.0, "3.0", "treinta", True, None])
def test_bad_age_names_edad(edad):
    violations = collect_violations(PersonIn, {"nombre": "Ana", "edad": edad})
    assert _paths(violations) == ["edad"]
    assert violations[0]["msg"] == "Edad debe ser un número entero positivo"


def test_digit_string_past_number_precision_is_rejected():
    with pytest.raises(ValidationError):
        PersonIn.model_validate({"nombre": "Ana", "edad": "9" * 39})


@pytest.mark.parametrize("correo", ["ana-at-gmail", "@gmail.com", "", 123])
def test_invalid_correo_is_reported(correo):
    violations = collect_violations(PersonIn, {"nombre": "Ana", "edad": 30, "correo": correo})
    assert _paths(violations) == ["correo"]
    assert violations[0]["msg"] == "Correo inválido"


def test_null_correo_is_absent():
    assert collect_violations(PersonIn, {"nombre": "Ana", "edad": 30, "correo": None}) == []


def test_all_person_violations_returned_together():
    violations = collect_violations(PersonIn, {"nombre": "", "edad": -3, "correo": "x"})
    assert _paths(violations) == ["nombre", "edad", "correo"]
