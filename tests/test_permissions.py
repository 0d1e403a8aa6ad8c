import pytest

from Auth_module.permissions import evaluate, permissions_for, DENIAL_REASON
from Auth_module import security


class TestPermissionEvaluator:
    @pytest.mark.parametrize("role", ["admin", "pastor"])
    def test_full_access_roles(self, role):
        for action in ("view", "add", "update", "archive", "admin"):
            assert evaluate(role, action).allowed

    def test_secretary_cannot_administer(self):
        assert evaluate("secretary", "archive").allowed
        assert not evaluate("secretary", "admin").allowed

    @pytest.mark.parametrize("role", ["board_member", "user"])
    def test_read_only_roles(self, role):
        assert evaluate(role, "view").allowed
        assert not evaluate(role, "add").allowed
        assert not evaluate(role, "archive").allowed

    def test_unknown_role_gets_nothing(self):
        assert permissions_for("bishop") == frozenset()
        assert not evaluate("bishop", "view").allowed

    def test_missing_role_is_treated_as_user(self):
        assert evaluate(None, "view").allowed
        assert not evaluate(None, "add").allowed

    def test_denial_reason_does_not_reveal_why(self):
        unknown = evaluate("bishop", "archive")
        insufficient = evaluate("board_member", "archive")
        assert unknown == insufficient
        assert unknown.reason == DENIAL_REASON


class TestPermissionGate:
    def test_missing_token_is_rejected(self, client):
        r = client.get("/api/members")
        assert r.status_code == 401
        assert r.json()["status"] == "error"

    def test_garbage_token_is_rejected(self, client):
        r = client.get("/api/members", headers={"Authorization": "Bearer not-a-jwt"})
        assert r.status_code == 401
        assert r.json()["message"] == "Invalid token"

    def test_token_for_deleted_user_is_rejected(self, client):
        token = security.create_access_token({"sub": "999", "username": "ghost", "role": "admin"})
        r = client.get("/api/members", headers={"Authorization": f"Bearer {token}"})
        assert r.status_code == 401

    def test_view_only_role_cannot_archive(self, client, make_user, add_members, register, archives, action_logs):
        add_members(("Thabo", "Mokoena"), ("Lerato", "Nkosi"))
        _, headers = make_user("board_member")

        r = client.put("/api/members/1/archive", json={"status": "Moved"}, headers=headers)

        assert r.status_code == 403
        assert r.json()["message"] == "Insufficient permissions"
        assert register() == [(1, "Thabo", "Mokoena"), (2, "Lerato", "Nkosi")]
        assert archives() == []
        assert action_logs() == []

    def test_gate_runs_before_handler(self, client, make_user, monkeypatch):
        import Member_module.Member_router as member_router

        def fail(*args, **kwargs):
            raise AssertionError("archive_member must not be reached")

        monkeypatch.setattr(member_router, "archive_member", fail)
        _, headers = make_user("user")
        r = client.put("/api/members/1/archive", json={"status": "Moved"}, headers=headers)
        assert r.status_code == 403

    def test_unknown_role_cannot_view(self, client, make_user):
        _, headers = make_user("bishop")
        r = client.get("/api/members", headers=headers)
        assert r.status_code == 403

    def test_role_is_read_from_database(self, client, make_user, session_factory):
        from Auth_module.Auth_model import User

        user_id, headers = make_user("secretary")
        with session_factory() as session:
            session.query(User).filter(User.id == user_id).update({User.role: "user"})
            session.commit()

        r = client.post("/api/members", json={"first_name": "A", "surname": "B"}, headers=headers)
        assert r.status_code == 403
