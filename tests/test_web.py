"""Starlette adapter: per-request envelopes, headers and route groups."""
import json

from starlette.applications import Starlette
from starlette.responses import PlainTextResponse
from starlette.testclient import TestClient

from jsonenvelope.core import EnvelopeSettings, ResponseEnvelope, ResponseTerminated
from jsonenvelope.web import EnvelopeRoutes, envelope_response, json_endpoint


async def save_user(request, envelope):
    body = await request.json()
    if not body.get("email"):
        envelope.mark_error("form.invalid", {"email": "Required"})
        return
    envelope.set_data_field("email", body["email"])
    envelope.mark_success("user.saved")


def show_debug(request, envelope):
    envelope.add_debug({"path": request.url.path})
    envelope.set_data_field("ok", True)


def stop_early(request, envelope):
    envelope.request_redirect("/login")
    raise ResponseTerminated(envelope)


def plain(request, envelope):
    return PlainTextResponse("raw")


def make_client(settings=None, resolver=None):
    users = (
        EnvelopeRoutes("users", settings=settings, resolver=resolver)
        .route("save", save_user, methods=["POST"])
        .route("debug", show_debug)
        .route("stop", stop_early)
        .route("/plain", plain)
    )
    return TestClient(Starlette(routes=users.routes()))


def test_envelope_response_headers():
    response = envelope_response(ResponseEnvelope())
    assert response.headers["content-type"] == "application/json"
    assert response.headers["cache-control"] == "no-cache, must-revalidate"
    assert response.headers["expires"] == "Sat, 26 Jul 1997 05:00:00 GMT"
    assert json.loads(response.body)["success"] is True


def test_envelope_response_without_content_type_or_cache():
    settings = EnvelopeSettings(content_type=None, avoid_cache=False)
    response = envelope_response(ResponseEnvelope(), settings)
    assert "content-type" not in response.headers
    assert "cache-control" not in response.headers


def test_success_route(translator):
    client = make_client(resolver=translator)
    r = client.post("/users/save", json={"email": "a@example.com"})
    assert r.status_code == 200
    assert r.json()["success"] is True
    assert r.json()["successMessage"] == "User saved"
    assert r.json()["email"] == "a@example.com"


def test_error_route_with_field_errors(translator):
    client = make_client(resolver=translator)
    r = client.post("/users/save", json={})
    body = r.json()
    assert body["success"] is False
    assert body["errorMessage"] == "Please correct the form"
    assert body["fieldErrors"] == {"email": "Required"}


def test_each_request_gets_fresh_envelope():
    client = make_client()
    client.post("/users/save", json={})
    body = client.post("/users/save", json={"email": "b@example.com"}).json()
    assert body["fieldErrors"] == {}
    assert body["errorMessage"] is None


def test_debug_hidden_unless_enabled():
    assert make_client().get("/users/debug").json()["debug"] == {}
    body = make_client(EnvelopeSettings(debug=True)).get("/users/debug").json()
    assert body["debug"] == {"Debug #1": {"path": "/users/debug"}}


def test_terminated_handler_still_sends_envelope():
    body = make_client().get("/users/stop").json()
    assert body["redirect"] == "/login"


def test_handler_response_short_circuits():
    r = make_client().get("/users/plain")
    assert r.text == "raw"


def test_method_not_allowed():
    assert make_client().get("/users/save").status_code == 405


def test_custom_prefix_and_sync_endpoint():
    def ping(request, envelope):
        envelope.set_data_field("pong", True)

    group = EnvelopeRoutes("health", prefix="/").route("ping", ping)
    client = TestClient(Starlette(routes=group.routes()))
    assert client.get("/ping").json()["pong"] is True


def test_json_endpoint_standalone():
    from starlette.routing import Route

    async def hello(request, envelope):
        envelope.set_data_field("hello", "world")

    app = Starlette(routes=[Route("/hello", json_endpoint(hello))])
    assert TestClient(app).get("/hello").json()["hello"] == "world"
