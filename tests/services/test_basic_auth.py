"""Credential gate — every path requires the configured Basic credentials.

Invariants verified:
    - No or wrong credentials → 401 + WWW-Authenticate, on known and unknown paths
    - Malformed Authorization header → 401, not 500
    - Correct credentials pass through to routing
"""

import pytest
from fastapi.security import HTTPBasicCredentials

from app.api.basic_auth import credentials_match
from app.config import get_settings


@pytest.mark.parametrize("method, path", [
    ("GET", "/personas"),
    ("POST", "/guardar"),
    ("POST", "/transaccion"),
    ("DELETE", "/personas/1"),
    ("GET", "/no-existe"),
    ("GET", "/health/"),
])
async def test_missing_credentials_is_401_on_any_path(anon_client, method, path):
    res = await anon_client.request(method, path)
    assert res.status_code == 401
    assert res.headers["www-authenticate"] == 'Basic realm="example"'
    assert res.text == "Autenticación requerida"


async def test_wrong_password_is_401(anon_client):
    res = await anon_client.get("/personas", auth=(get_settings().auth_user, "incorrecta"))
    assert res.status_code == 401


async def test_malformed_basic_header_is_401(anon_client):
    res = await anon_client.get("/personas", headers={"Authorization": "Basic %%%"})
    assert res.status_code == 401


async def test_bearer_scheme_is_401(anon_client):
    res = await anon_client.get("/personas", headers={"Authorization": "Bearer abc"})
    assert res.status_code == 401


async def test_valid_credentials_reach_route(client):
    res = await client.get("/personas")
    assert res.status_code == 200


async def test_unknown_path_with_credentials_is_404(client):
    res = await client.get("/no-existe")
    assert res.status_code == 404


def test_unconfigured_credentials_reject_everything():
    creds = HTTPBasicCredentials(username="", password="")
    assert not credentials_match(creds, "", "")


def test_credentials_match_requires_both_values():
    creds = HTTPBasicCredentials(username="admin", password="secreto")
    assert credentials_match(creds, "admin", "secreto")
    assert not credentials_match(creds, "admin", "otro")
    assert not credentials_match(creds, "otro", "secreto")
    assert not credentials_match(None, "admin", "secreto")
