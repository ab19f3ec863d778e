import pytest

from record_factory import Factory, FactorySettings, reset_default_factory


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    # Settings are read from the environment; keep tests independent of the shell
    for key in (
        "RECORD_FACTORY_STRICT_MUST",
        "RECORD_FACTORY_MUST_LOG_LEVEL",
        "RECORD_FACTORY_BARE_CALLABLES",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _fresh_default_factory():
    reset_default_factory(Factory(settings=FactorySettings()))
    yield
    reset_default_factory(Factory(settings=FactorySettings()))


@pytest.fixture()
def factory():
    return Factory(settings=FactorySettings())


@pytest.fixture()
def strict_factory():
    return Factory(settings=FactorySettings(strict_must=True))
