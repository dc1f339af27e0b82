"""
Registration and login scenarios.
"""

import pytest

pytestmark = pytest.mark.live

EMAIL = "eve.holt@reqres.in"


class TestRegistration:

    def test_register_returns_token_when_data_is_valid(self, api_client):
        response = api_client.post('/register', json={"email": EMAIL, "password": "pistol"})

        assert response.status_code == 200, "Expected status code 200 for successful registration."
        assert response.data.get('token') is not None, "Registration should return a token."

    def test_register_returns_bad_request_when_password_is_missing(self, api_client):
        response = api_client.post('/register', json={"email": EMAIL})

        assert response.status_code == 400, "Expected status code 400 for missing password."


class TestLogin:

    def test_login_returns_token_when_data_is_valid(self, api_client):
        response = api_client.post('/login', json={"email": EMAIL, "password": "cityslicka"})

        assert response.status_code == 200, "Expected status code 200 for successful login."
        assert response.data.get('token') is not None, "Login should return a token."

    def test_login_returns_bad_request_when_password_is_missing(self, api_client):
        response = api_client.post('/login', json={"email": EMAIL})

        assert response.status_code == 400, "Expected status code 400 for missing password."
