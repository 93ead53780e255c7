from unittest.mock import MagicMock

from sqlalchemy.exc import OperationalError

from cinelog.database import get_db
from cinelog.main import app


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["service"] == "Cinelog"


def test_health(client):
    assert client.get("/api/system/health").json()["status"] == "healthy"


def test_db_test(client):
    response = client.get("/api/system/db-test")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "result": 1}


def test_db_test_failure_hides_driver_error(client):
    broken = MagicMock()
    broken.execute.side_effect = OperationalError("SELECT 1", {}, Exception("secret dsn detail"))
    app.dependency_overrides[get_db] = lambda: broken

    response = client.get("/api/system/db-test")

    assert response.status_code == 500
    assert response.json() == {"message": "Database connection failed"}
