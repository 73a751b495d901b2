# --------------------------------------------------------------
# File: test_config.py
# Description: Pruebas de la configuración por entorno y del logging.
# --------------------------------------------------------------

import importlib
import logging

import pytest

import passpot_core.config as config_module


@pytest.fixture
def restore_root_level():
    """Restaura el nivel del logger raíz tras cada prueba."""
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def test_env_overrides(monkeypatch):
    """Las variables de entorno se reflejan al recargar el módulo.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar el entorno.

    Returns:
        None: Las aserciones validan los valores cargados.
    """
    monkeypatch.setenv("PASSPOT_LOG_LEVEL", "debug")
    monkeypatch.setenv("PASSPOT_DEMO_KEY", "QUJD")
    module = importlib.reload(config_module)
    assert module.LOG_LEVEL == "DEBUG"
    assert module.DEMO_KEY == "QUJD"

    monkeypatch.delenv("PASSPOT_LOG_LEVEL")
    monkeypatch.delenv("PASSPOT_DEMO_KEY")
    importlib.reload(config_module)


def test_configure_logging_sets_level(restore_root_level):
    """configure_logging aplica el nivel pedido al logger raíz."""
    config_module.configure_logging("info")
    assert logging.getLogger().level == logging.INFO


def test_configure_logging_rejects_unknown_level(restore_root_level):
    """Un nivel desconocido es un error de configuración."""
    with pytest.raises(ValueError):
        config_module.configure_logging("VERBOSE")
