"""Tests for logger configuration."""

import importlib
import io
import os
import sys

from loguru import logger

from evm_signature import create_valid_address
from evm_signature.config import get_settings
from evm_signature.utils.logger import reset_logger, setup_logger


def test_setup_logger_file_sink(tmp_path):
    log_file = tmp_path / "logs" / "evm_signature.log"
    logger.enable("evm_signature")
    try:
        handlers = setup_logger(log_level="WARNING", log_file=str(log_file))
        assert len(handlers) == 2

        create_valid_address("0x12")
    finally:
        reset_logger()
        logger.disable("evm_signature")

    content = log_file.read_text()
    assert "WARNING" in content
    assert "Deriving address from 4 characters, expected 66" in content


def test_setup_logger_console_only():
    try:
        assert len(setup_logger(log_level="INFO")) == 1
    finally:
        reset_logger()


def test_setup_logger_replaces_only_its_own_sinks():
    host_sink = io.StringIO()
    host_id = logger.add(host_sink, format="{message}")
    try:
        setup_logger(log_level="INFO")
        setup_logger(log_level="DEBUG")
        reset_logger()

        logger.info("host message")
    finally:
        logger.remove(host_id)

    assert "host message" in host_sink.getvalue()


def test_import_keeps_host_sinks_and_stays_silent(monkeypatch):
    for name in [m for m in sys.modules if m.split(".")[0] == "evm_signature"]:
        monkeypatch.delitem(sys.modules, name)

    host_sink = io.StringIO()
    host_id = logger.add(host_sink, level="DEBUG", format="{message}")
    try:
        package = importlib.import_module("evm_signature")
        logger.info("host message")
        package.create_valid_address("0x12")
    finally:
        logger.remove(host_id)

    output = host_sink.getvalue()
    assert "host message" in output
    assert "Deriving address" not in output


def test_dotenv_is_read_without_touching_environ(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("EVM_SIGNATURE_STRICT_LENGTHS=true\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("EVM_SIGNATURE_STRICT_LENGTHS", raising=False)

    assert get_settings().STRICT_LENGTHS is True
    assert "EVM_SIGNATURE_STRICT_LENGTHS" not in os.environ
