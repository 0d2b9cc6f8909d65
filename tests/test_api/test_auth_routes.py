"""REST /auth endpoint'leri: kayıt → doğrulama → giriş akışı ve davet kabulü."""

import pytest

PASSWORD = "Sup3rSecret!"

REGISTER_BODY = {
    "email": "founder@acme.example.com",
    "password": PASSWORD,
    "first_name": "Grace",
    "last_name": "Hopper",
    "organization_name": "Acme Inc",
}


def test_register_verify_login_flow(client, mail):
    response = client.post("/auth/register", json=REGISTER_BODY)

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["data"]["email"] == "founder@acme.example.com"
    assert body["data"]["subdomain"] == "acme-inc"

    login = client.post("/auth/login", json={"email": "founder@acme.example.com", "password": PASSWORD})
    assert login.status_code == 401
    assert login.json()["error"]["error_code"] == "EMAIL_NOT_VERIFIED"

    token = mail.verification.call_args.args[2]
    verify = client.post("/auth/verify-email", json={"token": token})
    assert verify.status_code == 200
    assert verify.json()["data"]["is_verified"] is True

    login = client.post("/auth/login", json={"email": "founder@acme.example.com", "password": PASSWORD})
    assert login.status_code == 200
    data = login.json()["data"]
    assert data["user"]["role"] == "ADMIN"

    me = client.get("/auth/me", headers={"Authorization": f"Bearer {data['access_token']}"})
    assert me.status_code == 200
    assert me.json()["data"]["email"] == "founder@acme.example.com"


def test_register_duplicate_email(client, make_user):
    make_user(email="founder@acme.example.com")

    response = client.post("/auth/register", json=REGISTER_BODY)

    assert response.status_code == 400
    assert response.json()["error"]["error_code"] == "USER_ALREADY_EXISTS"


@pytest.mark.parametrize("override,field", [
    ({"email": "not-an-email"}, "email"),
    # .test gibi özel kullanım alan adları EmailStr tarafından reddedilir
    ({"email": "founder@acme.test"}, "email"),
    ({"password": "short"}, "password"),
    ({"first_name": ""}, "first_name"),
    ({"organization_name": ""}, "organization_name"),
])
def test_register_validation(client, db, override, field):
    response = client.post("/auth/register", json={**REGISTER_BODY, **override})

    assert response.status_code == 422
    assert response.json()["error"]["error_details"]["errors"][0]["loc"] == ["body", field]


def test_login_wrong_password(client, make_user):
    make_user()

    response = client.post("/auth/login", json={"email": "owner@acme.example.com", "password": "Wrong-Pass1"})

    assert response.status_code == 401
    assert response.json()["error"]["error_code"] == "INVALID_CREDENTIALS"


def test_password_reset_flow(client, make_user, mail):
    make_user()

    response = client.post("/auth/request-password-reset", json={"email": "owner@acme.example.com"})
    assert response.status_code == 200

    token = mail.reset.call_args.args[2]
    reset = client.post("/auth/reset-password", json={"token": token, "new_password": "N3wSecret!"})
    assert reset.status_code == 200

    login = client.post("/auth/login", json={"email": "owner@acme.example.com", "password": "N3wSecret!"})
    assert login.status_code == 200


def test_password_reset_unknown_email_same_response(client, db, mail):
    response = client.post("/auth/request-password-reset", json={"email": "nobody@acme.example.com"})

    assert response.status_code == 200
    assert response.json()["message"] == "If that email exists in our system, a password reset link has been sent."
    mail.reset.assert_not_called()


def test_accept_invitation(client, make_user, make_invitation):
    inviter = make_user()
    invitation = make_invitation(inviter)

    response = client.post("/auth/accept-invitation", json={
        "token": invitation.token,
        "email": "new@acme.example.com",
        "first_name": "Alan",
        "last_name": "Turing",
        "password": PASSWORD,
    })

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["access_token"]
    assert data["user"]["tenant_id"] == inviter.tenant_id
    assert data["user"]["role"] == "USER"


def test_accept_invitation_blank_name(client, db):
    response = client.post("/auth/accept-invitation", json={
        "token": "abc",
        "email": "new@acme.example.com",
        "first_name": "   ",
        "last_name": "Turing",
        "password": PASSWORD,
    })

    assert response.status_code == 422
