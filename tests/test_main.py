import socket

from main import main, setup_argument_parser


def test_defaults_come_from_config():
    args = setup_argument_parser().parse_args([])

    assert args.port == 514
    assert args.host == "0.0.0.0"
    assert args.geo_endpoint == "http://ip-api.com/json/"
    assert not args.no_sound


def test_list_services(capsys):
    assert main(["--list-services"]) == 0

    out = capsys.readouterr().out
    assert "SSH (Secure Shell)" in out
    assert "Webmin" in out


def test_bind_failure_exits_with_error(capsys):
    holder = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    holder.bind(("127.0.0.1", 0))
    taken = holder.getsockname()[1]
    try:
        code = main(["--host", "127.0.0.1", "-P", str(taken), "--no-sound", "-q"])
    finally:
        holder.close()

    assert code == 1
    assert "Startup failed" in capsys.readouterr().err
