import io
import json

from joinapp.handler import JsonResponse
from joinapp.router import Router, setup_routes


class RecordingRegistrar:
    def __init__(self):
        self.names = []

    def register_user(self, username):
        self.names.append(username)
        return JsonResponse(200, {"code": 200, "message": username})


class ExplodingRegistrar:
    def register_user(self, username):
        raise RuntimeError("boom")


def test_join_route_passes_username():
    registrar = RecordingRegistrar()
    router = setup_routes(registrar)

    response = router.dispatch("GET", "/join/daniel")

    assert registrar.names == ["daniel"]
    assert response.payload["message"] == "daniel"


def test_unknown_path_is_not_found():
    registrar = RecordingRegistrar()
    router = setup_routes(registrar)

    response = router.dispatch("GET", "/leave/daniel")

    assert response.status == 404
    assert registrar.names == []


def test_extra_segments_do_not_match():
    registrar = RecordingRegistrar()
    response = setup_routes(registrar).dispatch("GET", "/join/daniel/more")
    assert response.status == 404
    assert registrar.names == []


def test_other_methods_do_not_match():
    registrar = RecordingRegistrar()
    response = setup_routes(registrar).dispatch("POST", "/join/daniel")
    assert response.status == 404
    assert registrar.names == []


def test_endpoint_failure_becomes_server_error():
    response = setup_routes(ExplodingRegistrar()).dispatch("GET", "/join/daniel")
    assert response.status == 500


def test_multiple_params():
    router = Router()
    router.get("/a/:x/b/:y", lambda params: JsonResponse(200, dict(params)))
    response = router.dispatch("GET", "/a/one/b/two")
    assert response.payload == {"x": "one", "y": "two"}


def test_wsgi_call():
    router = setup_routes(RecordingRegistrar())
    captured = {}

    def start_response(status, headers):
        captured["status"] = status
        captured["headers"] = dict(headers)

    environ = {"REQUEST_METHOD": "GET", "PATH_INFO": "/join/daniel", "wsgi.input": io.BytesIO()}
    body = b"".join(router(environ, start_response))

    assert captured["status"] == "200 OK"
    assert json.loads(body) == {"code": 200, "message": "daniel"}
    assert captured["headers"]["Content-Length"] == str(len(body))