import uuid

from fastapi.testclient import TestClient

from modules.base64_codec.tool.app import app as base64_app
from modules.json_to_typescript.tool.app import app as typescript_app
from modules.jwt_extract.tool.app import app as jwt_app
from modules.ulidgen.tool.app import app as ulid_app
from modules.uuidgen.tool.app import app as uuid_app


def test_ulid_page_and_generate() -> None:
    client = TestClient(ulid_app)
    page = client.get("/")
    assert page.status_code == 200
    assert "ULID Generator" in page.text

    response = client.post("/generate", data={"count": "4", "uppercase": "false"})
    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 4
    assert all(len(value) == 26 and value == value.lower() for value in body["values"])


def test_ulid_generate_bad_count() -> None:
    response = TestClient(ulid_app).post("/generate", data={"count": "lots"})
    assert response.status_code == 400
    assert response.json() == {"error": "Count must be a whole number."}


def test_uuid_generate_v5() -> None:
    client = TestClient(uuid_app)
    assert "dns" in client.get("/").text

    response = client.post(
        "/generate",
        data={"version": "5", "namespace": "dns", "name": "example.com"},
    )
    assert response.status_code == 200
    assert response.json()["values"] == [str(uuid.uuid5(uuid.NAMESPACE_DNS, "example.com"))]


def test_uuid_generate_v5_without_name() -> None:
    response = TestClient(uuid_app).post("/generate", data={"version": "5"})
    assert response.status_code == 400
    assert response.json() == {"error": "Name is required for UUID v5."}


def test_typescript_convert() -> None:
    client = TestClient(typescript_app)
    assert client.get("/").status_code == 200

    response = client.post("/convert", data={"json_text": '{"a": 1, "b": "x"}'})
    assert response.status_code == 200
    assert response.json()["output"] == "type Root = {\n  a: number\n  b: string\n}"

    response = client.post(
        "/convert",
        data={
            "json_text": '{"user": {"name": "x"}}',
            "use_multiple_interfaces": "true",
            "root_name": "Root",
        },
    )
    assert response.json()["mode"] == "interfaces"
    assert "interface User {" in response.json()["output"]


def test_typescript_convert_invalid_json() -> None:
    response = TestClient(typescript_app).post("/convert", data={"json_text": "{oops"})
    assert response.status_code == 400
    assert response.json()["error"].startswith("JSON error at line 1")


def test_form_type_errors_become_short_400() -> None:
    response = TestClient(typescript_app).post(
        "/convert",
        data={"json_text": "{}", "use_multiple_interfaces": "maybe"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid input."}


def test_base64_transform() -> None:
    client = TestClient(base64_app)
    assert client.get("/").status_code == 200
    response = client.post("/transform", data={"text": "Hello", "mode": "encode"})
    assert response.json() == {"mode": "encode", "output": "SGVsbG8="}
    response = client.post("/transform", data={"text": "@@", "mode": "decode"})
    assert response.status_code == 400


def test_jwt_extract() -> None:
    client = TestClient(jwt_app)
    assert client.get("/").status_code == 200
    token = "eyJhbGciOiJIUzI1NiJ9.eyJzdWIiOiIxIn0.c2ln"
    response = client.post("/extract", data={"token": token})
    assert response.status_code == 200
    assert response.json()["header"] == {"alg": "HS256"}
    assert response.json()["payload"] == {"sub": "1"}

    response = client.post("/extract", data={"token": "only.two"})
    assert response.status_code == 400
