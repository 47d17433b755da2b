from attendance_tracker.users.qr import parse_qr_payload, qr_payload, render_qr_png


def test_payload_uses_user_prefix():
    assert qr_payload("42") == "USER:42"


def test_parse_payload():
    assert parse_qr_payload("USER:42") == "42"
    assert parse_qr_payload("  user:7 ") == "7"
    assert parse_qr_payload("USER:") is None
    assert parse_qr_payload("EMP:42") is None
    assert parse_qr_payload("") is None
    assert parse_qr_payload(None) is None


def test_render_png_badge():
    png = render_qr_png(qr_payload("1"))

    assert png.startswith(b"\x89PNG\r\n\x1a\n")
    assert len(png) > 100
