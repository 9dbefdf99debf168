# -*- coding: utf-8 -*-
from __future__ import annotations

import pytest

from ikpro.core.errors import NotFoundError


def test_notification_lifecycle(services) -> None:
    created = services.notifications.create({"user_id": "7", "title": "Duyuru", "message": "Toplantı 14:00"})
    services.notifications.create({"user_id": "7", "title": "Hatırlatma", "message": "Rapor", "type": "warning"})
    assert created["is_read"] is False
    assert services.notifications.unread_count("7") == 2

    read = services.notifications.mark_read(created["id"], "7")
    assert read["is_read"] is True
    assert services.notifications.unread_count("7") == 1
    assert services.notifications.mark_all_read("7") == 1
    assert services.notifications.unread_count("7") == 0


def test_notification_owner_only(services) -> None:
    created = services.notifications.create({"user_id": "7", "title": "Özel", "message": "Gizli"})
    with pytest.raises(NotFoundError):
        services.notifications.mark_read(created["id"], "8")
    with pytest.raises(NotFoundError):
        services.notifications.delete(created["id"], "8")
    services.notifications.delete(created["id"], "7")
    assert services.notifications.list_for_user("7") == []


def test_notification_type_checked(services) -> None:
    with pytest.raises(ValueError):
        services.notifications.create({"user_id": "7", "title": "X", "message": "Y", "type": "urgent"})


def test_message_flow(services) -> None:
    sent = services.messages.send("1", {"to_user_id": "2", "subject": "Merhaba", "content": "Nasılsın?"})
    assert services.messages.unread_count("2") == 1
    assert [m["id"] for m in services.messages.inbox("2")] == [sent["id"]]
    assert [m["id"] for m in services.messages.sent("1")] == [sent["id"]]

    # Alıcıya bildirim de düşer
    notes = services.notifications.list_for_user("2")
    assert notes[0]["title"] == "Yeni Mesaj"

    with pytest.raises(ValueError):
        services.messages.mark_read(sent["id"], "1")
    assert services.messages.mark_read(sent["id"], "2")["is_read"] is True
    assert services.messages.inbox("2", only_unread=True) == []


def test_message_privacy_and_self(services) -> None:
    sent = services.messages.send("1", {"to_user_id": "2", "content": "Selam"})
    with pytest.raises(NotFoundError):
        services.messages.get(sent["id"], "3")
    with pytest.raises(ValueError):
        services.messages.send("1", {"to_user_id": "1", "content": "Not"})
    with pytest.raises(ValueError):
        services.messages.send("1", {"to_user_id": "2", "content": "  "})


def test_settings_roundtrip_json(services) -> None:
    saved = services.settings.set("5", {"category": "appearance", "key": "theme", "value": {"mode": "dark"}})
    assert saved["value"] == {"mode": "dark"}
    services.settings.set("5", {"category": "appearance", "key": "theme", "value": {"mode": "light"}})
    rows = services.settings.list_for_user("5", "appearance")
    assert len(rows) == 1
    assert rows[0]["value"] == {"mode": "light"}

    with pytest.raises(ValueError):
        services.settings.set("5", {"category": "gizli", "key": "x", "value": 1})
    services.settings.delete("5", "appearance", "theme")
    with pytest.raises(NotFoundError):
        services.settings.get("5", "appearance", "theme")


def test_mutations_are_audited(services) -> None:
    note = services.notifications.create({"user_id": "7", "title": "Duyuru", "message": "Toplantı"}, actor="1")
    services.notifications.mark_read(note["id"], "7")
    services.notifications.delete(note["id"], "7")
    msg = services.messages.send("1", {"to_user_id": "2", "content": "Selam"})
    services.messages.mark_read(msg["id"], "2")
    services.messages.delete(msg["id"], "1")
    services.settings.set("2", {"category": "general", "key": "dil", "value": "tr"})
    services.settings.delete("2", "general", "dil")

    trail = [(r["actor"], r["resource"], r["action"]) for r in reversed(services.system.audit_logs())]
    assert trail == [
        ("1", "notification", "create"),
        ("7", "notification", "read"),
        ("7", "notification", "delete"),
        ("1", "message", "send"),
        ("2", "message", "read"),
        ("1", "message", "delete"),
        ("2", "setting", "upsert"),
        ("2", "setting", "delete"),
    ]
