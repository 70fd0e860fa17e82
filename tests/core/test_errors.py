"""Error hierarchy tests — status codes and client-facing bodies.

Tests:
    - Each GatewayError subclass carries its HTTP status and category
    - to_response() uses the public Spanish keys and never includes internal detail
"""

from app.core.errors import (
    BusinessError,
    ErrorCategory,
    ErrorSeverity,
    GatewayError,
    InfrastructureError,
    RecordNotFoundError,
    RequestValidationFailed,
    StorageError,
)


def test_validation_failed_carries_full_violation_list():
    violations = [{"path": "nombre"}, {"path": "edad"}]
    err = RequestValidationFailed(violations)
    assert err.http_status == 400
    assert err.category == ErrorCategory.VALIDATION
    assert err.to_response() == {"errores": violations}


def test_not_found_is_404_with_mensaje():
    err = RecordNotFoundError("Persona", 7)
    assert err.http_status == 404
    assert err.to_response() == {"mensaje": "Persona no encontrada"}
    assert not isinstance(err, StorageError)


def test_storage_error_exposes_only_client_message():
    err = StorageError("update", "Error al actualizar persona")
    assert err.http_status == 500
    assert err.severity == ErrorSeverity.CRITICAL
    assert err.context.operation == "update"
    assert err.to_response() == {"error": "Error al actualizar persona"}


def test_infrastructure_error_body_is_generic():
    err = InfrastructureError("relay")
    assert err.http_status == 500
    assert err.to_response() == {
        "mensaje": InfrastructureError.CLIENT_MESSAGE,
        "detalle": InfrastructureError.CLIENT_DETAIL,
    }


def test_business_error_is_400_with_backend_code():
    err = BusinessError(12, "Orden de compra cerrada")
    assert err.http_status == 400
    assert err.category == ErrorCategory.BUSINESS_RULE
    assert err.to_response() == {"mensaje": "Orden de compra cerrada", "codigo": 12}


def test_all_errors_share_base():
    for err in (
        RequestValidationFailed([]), RecordNotFoundError("Persona", 1),
        StorageError("create", "x"), InfrastructureError("relay"),
        BusinessError(1, "x"),
    ):
        assert isinstance(err, GatewayError)
