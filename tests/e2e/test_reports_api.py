"""End-to-end tests for report and moderation endpoints."""

from tests.conftest import as_user, new_user_id


class TestReportEndpoints:
    """End-to-end tests for reporting and moderating comments."""

    def _thread(self, client, content_id) -> tuple[str, str]:
        parent = client.post(
            "/comments",
            json={"content_id": content_id, "text": "Parent"},
            headers=as_user(new_user_id()),
        ).json()
        reply = client.post(
            "/comments",
            json={
                "content_id": content_id,
                "text": "Reply",
                "parent_id": parent["comment_id"],
            },
            headers=as_user(new_user_id()),
        ).json()
        return parent["comment_id"], reply["comment_id"]

    def _report(self, client, comment_id, reporter):
        return client.post(
            "/reports",
            json={"comment_id": comment_id, "reason": "spam"},
            headers=as_user(reporter),
        )

    def test_report_hides_thread_from_reporter_only(self, client, content_id):
        # Arrange
        parent_id, _ = self._thread(client, content_id)
        reporter, bystander = new_user_id(), new_user_id()

        # Act
        response = self._report(client, parent_id, reporter)
        reporter_view = client.get(
            "/comments", params={"content_id": content_id}, headers=as_user(reporter)
        ).json()
        reporter_replies = client.get(
            "/comments",
            params={"content_id": content_id, "parent_id": parent_id},
            headers=as_user(reporter),
        ).json()
        bystander_view = client.get(
            "/comments", params={"content_id": content_id}, headers=as_user(bystander)
        ).json()

        # Assert
        assert response.status_code == 201
        assert reporter_view["comments"] == []
        assert reporter_replies["comments"] == []
        assert [c["comment_id"] for c in bystander_view["comments"]] == [parent_id]

    def test_duplicate_report_conflicts(self, client, content_id):
        parent_id, _ = self._thread(client, content_id)
        reporter = new_user_id()
        self._report(client, parent_id, reporter)

        response = self._report(client, parent_id, reporter)

        assert response.status_code == 409
        mine = client.get("/reports/mine", headers=as_user(reporter)).json()
        assert len(mine) == 1

    def test_unknown_reason_is_validation_error(self, client, content_id):
        parent_id, _ = self._thread(client, content_id)

        response = client.post(
            "/reports",
            json={"comment_id": parent_id, "reason": "boring"},
            headers=as_user(new_user_id()),
        )

        assert response.status_code == 422

    def test_moderation_is_one_way(self, client, content_id):
        # Arrange
        parent_id, _ = self._thread(client, content_id)
        report = self._report(client, parent_id, new_user_id()).json()
        base = f"/moderation/reports/{report['report_id']}"

        # Act
        reviewed = client.post(f"{base}/review", json={"admin_response": "Warned"})
        reviewed_again = client.post(f"{base}/review", json={"admin_response": "Again"})
        closed = client.post(f"{base}/deactivate")
        closed_again = client.post(f"{base}/deactivate")
        detail = client.get(base).json()

        # Assert
        assert reviewed.status_code == 200
        assert reviewed_again.status_code == 409
        assert closed.status_code == 200
        assert closed_again.status_code == 409
        assert detail["is_reviewed"] is True
        assert detail["admin_response"] == "Warned"
        assert detail["is_active"] is False

    def test_pending_queue_and_filter(self, client, content_id):
        parent_id, reply_id = self._thread(client, content_id)
        self._report(client, parent_id, new_user_id())
        self._report(client, reply_id, new_user_id())

        pending = client.get("/moderation/reports/pending").json()
        filtered = client.get(
            "/moderation/reports/details",
            params={"comment_id": reply_id, "page_size": 5},
        ).json()

        assert len(pending) == 2
        assert filtered["total"] == 1
        assert filtered["items"][0]["comment_text"] == "Reply"

    def test_purge_and_reconcile(self, client, content_id):
        parent_id, reply_id = self._thread(client, content_id)

        purged = client.delete(f"/moderation/comments/{reply_id}")
        reconciled = client.post(f"/moderation/content/{content_id}/reconcile")
        parent = client.get(f"/comments/{parent_id}").json()

        assert purged.status_code == 200
        assert client.delete(f"/moderation/comments/{reply_id}").status_code == 404
        assert reconciled.json()["comments_checked"] == 1
        assert reconciled.json()["reply_counters_repaired"] == 0
        assert parent["reply_count"] == 0


class TestHealthEndpoint:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
