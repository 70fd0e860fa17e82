"""Relay outcome tests — classification of procedure OUT parameters and translation.

Tests:
    - code 0 → RelayAccepted, code != 0 → RelayRejected, unusable code → RelayFailed
    - relay_response maps each variant to its own status and body shape
    - RelayFailed detail never reaches the response body
"""

from decimal import Decimal

import pytest

from app.core.relay_outcome import (
    RelayAccepted, RelayFailed, RelayRejected, classify_procedure_result,
)
from app.core.response_translator import relay_response


def test_zero_code_is_accepted():
    assert classify_procedure_result(0, "Registrado") == RelayAccepted(0, "Registrado")


def test_float_zero_from_driver_is_accepted():
    assert classify_procedure_result(0.0, "ok") == RelayAccepted(0, "ok")


@pytest.mark.parametrize("code", [1, -20001, Decimal(45)])
def test_non_zero_code_is_rejected(code):
    outcome = classify_procedure_result(code, "RUC del proveedor no existe")
    assert isinstance(outcome, RelayRejected)
    assert outcome.code == int(code)
    assert outcome.message == "RUC del proveedor no existe"


def test_null_message_becomes_empty_string():
    assert classify_procedure_result(0, None) == RelayAccepted(0, "")


@pytest.mark.parametrize("code", [None, "abc", 1.5, float("inf"), float("-inf"), float("nan")])
def test_unusable_code_is_failure(code):
    assert isinstance(classify_procedure_result(code, "x"), RelayFailed)


# --- Translation --------------------------------------------------------------

def test_accepted_translates_to_200_with_code():
    assert relay_response(RelayAccepted(0, "Registrado")) == (
        200, {"mensaje": "Registrado", "codigo": 0},
    )


def test_rejected_translates_to_400_with_backend_code_and_message():
    assert relay_response(RelayRejected(3, "Documento duplicado")) == (
        400, {"mensaje": "Documento duplicado", "codigo": 3},
    )


def test_failed_translates_to_generic_500():
    status, body = relay_response(RelayFailed("ORA-12541: TNS:no listener"))
    assert status == 500
    assert set(body) == {"mensaje", "detalle"}
    assert "ORA-12541" not in str(body)


def test_unknown_outcome_raises_type_error():
    with pytest.raises(TypeError):
        relay_response(object())
