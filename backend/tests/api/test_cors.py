"""Origin Guard & CORS: allow-listed origins pass, others are rejected."""


async def test_disallowed_origin_rejected(client):
    res = await client.get("/", headers={"Origin": "https://evil.example"})
    assert res.status_code == 403
    assert res.json()["message"] == "Not allowed by CORS"
    assert "access-control-allow-origin" not in res.headers


async def test_disallowed_origin_cannot_reach_handlers(client):
    res = await client.post(
        "/signup", headers={"Origin": "https://evil.example"},
        json={"firstName": "E", "lastName": "V", "email": "e@evil.example", "password": "x"},
    )
    assert res.status_code == 403
    login = await client.post("/login", json={"email": "e@evil.example", "password": "x"})
    assert login.status_code == 404


async def test_allowed_origin_gets_cors_headers(client):
    res = await client.get("/", headers={"Origin": "http://localhost:3000"})
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == "http://localhost:3000"


async def test_no_origin_allowed(client):
    res = await client.get("/")
    assert res.status_code == 200


async def test_preflight_from_disallowed_origin_rejected(client):
    res = await client.options(
        "/create-qr",
        headers={
            "Origin": "https://evil.example",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert res.status_code == 403


async def test_preflight_from_allowed_origin(client):
    res = await client.options(
        "/create-qr",
        headers={
            "Origin": "https://createqr.d1nfh4ldjnk0ad.amplifyapp.com",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "authorization,content-type",
        },
    )
    assert res.status_code == 200
