import json
import logging

from utils.logger import CustomJsonFormatter, get_logger, setup_logging


def test_setup_is_idempotent():
    first = setup_logging("DEBUG")
    second = setup_logging("DEBUG")

    assert first is second
    assert len(second.handlers) == 1


def test_child_loggers_share_the_root():
    assert get_logger("provisioner").name == "pg_manager.provisioner"


def test_records_carry_tenant_id():
    formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(logger)s %(message)s")
    record = logging.LogRecord("pg_manager.test", logging.INFO, __file__, 1, "Tables created", None, None)
    record.tenant_id = 7

    payload = json.loads(formatter.format(record))

    assert payload["message"] == "Tables created"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "pg_manager.test"
    assert payload["tenant_id"] == 7
