def _restore(client, headers, archive_id):
    return client.put(f"/api/archives/{archive_id}/restore", headers=headers)


class TestRestoreMember:
    def test_restore_appends_to_register(self, client, secretary_headers, add_members, add_archive, register, archives):
        add_members(("Thabo", "Mokoena"), ("Palesa", "Molapo"))
        archive_id = add_archive("member", {"first_name": "Lerato", "surname": "Nkosi", "status": "Moved", "former_palo": 2}, palo=1)

        r = _restore(client, secretary_headers, archive_id)

        assert r.status_code == 200
        body = r.json()
        assert body["message"] == "Record restored successfully"
        assert body["data"]["palo"] == 3
        assert body["data"]["first_name"] == "Lerato"
        assert body["data"]["surname"] == "Nkosi"
        assert register() == [(1, "Thabo", "Mokoena"), (2, "Palesa", "Molapo"), (3, "Lerato", "Nkosi")]
        assert archives() == []

    def test_restore_into_empty_register_gets_first_palo(self, client, secretary_headers, add_archive, register):
        archive_id = add_archive("member", {"first_name": "Lerato", "surname": "Nkosi"}, palo=1)

        r = _restore(client, secretary_headers, archive_id)

        assert r.json()["data"]["palo"] == 1
        assert register() == [(1, "Lerato", "Nkosi")]

    def test_restored_member_does_not_reclaim_former_palo(self, client, secretary_headers, add_members, register):
        add_members(("Thabo", "Mokoena"), ("Lerato", "Nkosi"), ("Palesa", "Molapo"))
        client.put("/api/members/1/archive", json={"status": "Moved"}, headers=secretary_headers)
        archive_id = client.get("/api/archives", headers=secretary_headers).json()["data"][0]["id"]

        r = _restore(client, secretary_headers, archive_id)

        assert r.json()["data"]["palo"] == 3
        assert register() == [(1, "Lerato", "Nkosi"), (2, "Palesa", "Molapo"), (3, "Thabo", "Mokoena")]

    def test_receipts_come_back_with_the_member(self, client, secretary_headers, add_members):
        add_members(("Thabo", "Mokoena"))
        client.put("/api/members/1/receipt", json={"year": "2024", "receipt": "R-17"}, headers=secretary_headers)
        client.put("/api/members/1/archive", json={"status": "Moved"}, headers=secretary_headers)
        archive_id = client.get("/api/archives", headers=secretary_headers).json()["data"][0]["id"]

        _restore(client, secretary_headers, archive_id)

        member = client.get("/api/members/1", headers=secretary_headers).json()["data"]
        assert member["first_name"] == "Thabo"
        assert member["receipts"] == {"2024": "R-17"}

    def test_legacy_snapshot_keys_are_accepted(self, client, secretary_headers, add_archive, register):
        archive_id = add_archive("member", {"lebitso": " Mpho ", "fane": "Letsie", "receipt_2026": "R-3"}, palo=4)

        r = _restore(client, secretary_headers, archive_id)

        assert r.status_code == 200
        assert register() == [(1, "Mpho", "Letsie")]
        member = client.get("/api/members/1", headers=secretary_headers).json()["data"]
        assert member["receipts"] == {"2026": "R-3"}

    def test_audit_entry_records_new_palo(self, client, secretary, add_members, add_archive, action_logs):
        user_id, headers = secretary
        add_members(("Thabo", "Mokoena"))
        archive_id = add_archive("member", {"first_name": "Lerato", "surname": "Nkosi"}, palo=1)

        _restore(client, headers, archive_id)

        [(actor, action, details)] = action_logs()
        assert actor == user_id
        assert action == "restore_member"
        assert details == {"archive_id": archive_id, "palo": 2, "first_name": "Lerato", "surname": "Nkosi"}

    def test_audit_failure_does_not_block_restore(self, client, secretary_headers, add_archive, register, archives, action_logs, monkeypatch):
        import Audit_module.Action_log_crud as action_log_crud

        def broken_log(**kwargs):
            raise RuntimeError("action log unavailable")

        monkeypatch.setattr(action_log_crud, "ActionLog", broken_log)
        archive_id = add_archive("member", {"first_name": "Lerato", "surname": "Nkosi"}, palo=1)

        r = _restore(client, secretary_headers, archive_id)

        assert r.status_code == 200
        assert register() == [(1, "Lerato", "Nkosi")]
        assert archives() == []
        assert action_logs() == []


class TestRestoreRejections:
    def test_baptism_record_is_not_restorable(self, client, secretary_headers, add_archive, register, archives):
        archive_id = add_archive("baptism", {"first_name": "Karabo", "surname": "Sello"})

        r = _restore(client, secretary_headers, archive_id)

        assert r.status_code == 400
        assert r.json()["message"] == "Only member records can be restored"
        assert r.json()["record_type"] == "baptism"
        assert register() == []
        assert [kind for _, kind, _, _ in archives()] == ["baptism"]

    def test_wedding_record_is_not_restorable(self, client, secretary_headers, add_archive, archives):
        archive_id = add_archive("wedding", {"groom_first_name": "Sipho", "bride_first_name": "Naledi"})

        r = _restore(client, secretary_headers, archive_id)

        assert r.status_code == 400
        assert len(archives()) == 1

    def test_snapshot_without_names_is_rejected(self, client, secretary_headers, add_archive, register, archives, action_logs):
        archive_id = add_archive("member", {"first_name": "Lerato", "status": "Moved"}, palo=1)

        r = _restore(client, secretary_headers, archive_id)

        assert r.status_code == 400
        assert r.json()["message"].startswith("Invalid archive data")
        assert register() == []
        assert len(archives()) == 1
        assert action_logs() == []

    def test_unknown_archive_id(self, client, secretary_headers):
        r = _restore(client, secretary_headers, 404)

        assert r.status_code == 404
        assert r.json()["message"] == "Archive record not found"

    def test_viewer_cannot_restore(self, client, make_user, add_archive, archives):
        _, headers = make_user("board_member")
        archive_id = add_archive("member", {"first_name": "Lerato", "surname": "Nkosi"}, palo=1)

        r = _restore(client, headers, archive_id)

        assert r.status_code == 403
        assert len(archives()) == 1
