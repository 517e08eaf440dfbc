import logging
import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError
from gqlroute.config.endpoint import Endpoint
from gqlroute.config.general import General
from gqlroute.main import create_app
from conftest import SCHEMA_FILE, query, mutation


def test_create_app_with_schema(schema):
    with TestClient(create_app(schema)) as client:
        response = client.post("/graphql", json={"query": "{ hello }"})
        assert response.status_code == 200
        assert response.json() == {"data": {"hello": "world"}}
        assert client.get("/graphql/schema.graphql").status_code == 200


def test_create_app_from_schema_file(monkeypatch):
    monkeypatch.setattr("gqlroute.main.endpoint_settings", Endpoint(SCHEMA_FILE=SCHEMA_FILE))
    app = create_app(None, query, mutation, provide_context=lambda r: {"user": "x"})
    with TestClient(app) as client:
        response = client.post("/graphql", json={"query": "mutation { ping }"})
        assert response.json() == {"data": {"ping": "pong"}}


def test_endpoint_settings_from_environment(monkeypatch):
    monkeypatch.setenv("GQLROUTE_GRAPHQL_PATH", "/api/graphql/")
    monkeypatch.setenv("GQLROUTE_EXPOSE_SCHEMA", "false")
    settings = Endpoint()
    assert settings.GRAPHQL_PATH == "/api/graphql"
    assert settings.EXPOSE_SCHEMA is False
    assert settings.SCHEMA_FILE == "schema.graphqls"


@pytest.mark.parametrize("path", ["graphql", "/"])
def test_endpoint_settings_reject_bad_path(path):
    with pytest.raises(ValidationError):
        Endpoint(GRAPHQL_PATH=path)


def test_general_mount_path():
    assert General(MOUNT_PATH="/").MOUNT_PATH == ""
    assert General(MOUNT_PATH="/api/").MOUNT_PATH == "/api"


def test_request_logger_records_operation_name(schema, caplog, monkeypatch):
    # the gqlroute logger does not propagate under logging.conf
    monkeypatch.setattr(logging.getLogger("gqlroute"), "propagate", True)
    with caplog.at_level(logging.INFO, logger="gqlroute.middleware.requestlogger"):
        with TestClient(create_app(schema)) as client:
            client.post(
                "/graphql", json={"query": "query Op { hello }", "operationName": "Op"}
            )
    completed = [r.getMessage() for r in caplog.records if "completed_in" in r.getMessage()]
    assert len(completed) == 1
    assert "status_code=200" in completed[0]
    assert "operation=Op" in completed[0]
