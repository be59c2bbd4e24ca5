from helix_hub.database import SqlPasswordProvider


async def test_local_password_skips_key_vault(monkeypatch):
    provider = SqlPasswordProvider()

    async def fail():
        raise AssertionError("Key Vault should not be called")

    monkeypatch.setattr(provider, "_fetch_from_key_vault", fail)

    assert await provider.get_password() == "test-password"


async def test_key_vault_password_is_fetched_once(monkeypatch, settings):
    monkeypatch.setattr(settings, "sql_password", None)
    provider = SqlPasswordProvider()
    calls = []

    async def fetch():
        calls.append(1)
        return "from-vault"

    monkeypatch.setattr(provider, "_fetch_from_key_vault", fetch)

    assert await provider.get_password() == "from-vault"
    assert await provider.get_password() == "from-vault"
    assert len(calls) == 1

    provider.clear()
    await provider.get_password()
    assert len(calls) == 2
