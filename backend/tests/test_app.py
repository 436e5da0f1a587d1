import os
import sys

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("ACCESS_SECRET_KEY", "0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef")
os.environ.setdefault("REFRESH_SECRET_KEY", "fedcba9876543210fedcba9876543210fedcba9876543210fedcba9876543210")

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from fastapi.testclient import TestClient

from app.main import app


def test_health_check_runs_with_lifespan():
    with TestClient(app) as client:
        response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "app": "Admin Panel"}


def test_routes_are_mounted():
    paths = {route.path for route in app.routes}

    assert {"/auth/login", "/auth/refresh", "/auth/logout"} <= paths
    assert {"/api/admin", "/api/admin/search", "/api/admin/{admin_id}"} <= paths
    assert {"/api/user", "/api/user/{user_id}/block", "/api/user/{user_id}/unblock"} <= paths
