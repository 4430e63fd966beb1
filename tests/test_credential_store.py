from __future__ import annotations

from word_exam.core.credential_store import DEFAULT_USER_FILE, CredentialStore


def test_from_file_keeps_two_field_lines(tmp_path):
    path = tmp_path / "users.txt"
    path.write_text(
        "alice, secret \n"
        "bob,pw,extra\n"
        "no-password\n"
        "\n"
        "carol,carol123\n",
        encoding="utf-8",
    )

    store = CredentialStore.from_file(path)

    assert store.usernames() == ["alice", "carol"]
    assert len(store) == 2
    assert "alice" in store
    assert "bob" not in store


def test_verify():
    store = CredentialStore({"alice": "secret"})

    assert store.verify("alice", "secret")
    assert not store.verify("alice", "wrong")
    assert not store.verify("mallory", "secret")


def test_missing_file_gives_empty_store(tmp_path):
    store = CredentialStore.from_file(tmp_path / "missing.txt")

    assert len(store) == 0
    assert not store.verify("alice", "alice123")


def test_bundled_users_load():
    store = CredentialStore.from_file(DEFAULT_USER_FILE)

    assert store.verify("alice", "alice123")
