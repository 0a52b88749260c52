import core.logger as logger


def test_print_info_tags_line(monkeypatch, capsys):
    monkeypatch.setattr(logger, "IS_SERVERLESS", True)
    logger.print_info("GET getDropdownData")
    out = capsys.readouterr().out
    assert out.startswith("[")
    assert out.rstrip().endswith("[INFO] GET getDropdownData")


def test_handler_logs_action_with_info_tag(monkeypatch, capsys, store, config):
    from handler import handle_request

    monkeypatch.setattr(logger, "IS_SERVERLESS", True)
    handle_request({"httpMethod": "GET", "queryStringParameters": {"action": "getDropdownData"}},
                   config, store_factory=lambda cfg: store)
    assert "[INFO] GET getDropdownData" in capsys.readouterr().out
