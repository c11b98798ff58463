from transvoucher.scripts.make_sig import main
from transvoucher.webhooks import parse_event

from conftest import sign


def test_prints_signature(capsys, event_body, secret):
    assert main([secret, event_body.decode()]) == 0

    printed = capsys.readouterr().out.strip()
    assert printed == sign(event_body, secret)
    assert parse_event(event_body, printed, secret).is_valid


def test_rejects_invalid_json(capsys):
    assert main(["s3cr3t", "{not json"]) == 1
    assert "valid JSON" in capsys.readouterr().err


def test_usage(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err
