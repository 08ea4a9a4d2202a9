def test_register_returns_user_without_password(client):
    response = client.post("/api/auth/register", json={
        "name": "Jamie Rivera",
        "email": "Jamie@Acme.io",
        "password": "secret-pass",
        "role": "RECRUITER",
    })

    assert response.status_code == 201
    user = response.json()
    assert user["id"].startswith("u")
    assert user["email"] == "jamie@acme.io"
    assert user["role"] == "RECRUITER"
    assert "password" not in user


def test_register_defaults_to_job_seeker(client, seeker):
    assert seeker["role"] == "JOB_SEEKER"


def test_register_duplicate_email_rejected(client, seeker):
    response = client.post("/api/auth/register", json={
        "name": "Someone Else",
        "email": "JAMIE@acme.io",
        "password": "another",
    })

    assert response.status_code == 400
    assert response.json() == {"detail": "User already exists"}


def test_register_invalid_email(client):
    response = client.post("/api/auth/register", json={
        "name": "Bad Email",
        "email": "not-an-email",
        "password": "x",
    })
    assert response.status_code == 422


def test_login(client, seeker):
    response = client.post("/api/auth/login", json={"email": "jamie@acme.io", "password": "secret-pass"})

    assert response.status_code == 200
    assert response.json()["id"] == seeker["id"]
    assert "password" not in response.json()


def test_login_seeded_account(client):
    response = client.post("/api/auth/login", json={"email": "sarah@techcorp.com", "password": "password123"})

    assert response.status_code == 200
    assert response.json()["role"] == "RECRUITER"


def test_login_wrong_password(client, seeker):
    response = client.post("/api/auth/login", json={"email": "jamie@acme.io", "password": "nope"})

    assert response.status_code == 401
    assert response.json() == {"detail": "Invalid credentials"}


def test_login_unknown_email(client):
    response = client.post("/api/auth/login", json={"email": "ghost@acme.io", "password": "x"})
    assert response.status_code == 401
