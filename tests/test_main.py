"""
Tests for the console front-end
"""

import io
from unittest.mock import Mock

import pytest

import main
from chatclient.config import ClientConfig
from chatclient.protocol.models import Disconnected, LoginResult, Message, UserList


@pytest.fixture
def client():
    return Mock()


@pytest.mark.parametrize(
    ("line", "method", "args"),
    [
        ("/login alice\n", "try_login", ("alice",)),
        ("/privmsg bob hi there\n", "send_private_message", ("bob", "hi there")),
        ("/users\n", "refresh_user_list", ()),
        ("/help\n", "ask_supported_commands", ()),
        ("/joke\n", "send_public_message", ("/joke",)),
        ("hello everyone\n", "send_public_message", ("hello everyone",)),
    ],
)
def test_handle_input_maps_commands(client, line, method, args):
    assert main.handle_input(client, line) is True
    getattr(client, method).assert_called_once_with(*args)


def test_handle_input_quit(client):
    assert main.handle_input(client, "/quit\n") is False


def test_handle_input_incomplete_privmsg_prints_usage(client, capsys):
    assert main.handle_input(client, "/privmsg bob\n") is True
    client.send_private_message.assert_not_called()
    assert "Usage" in capsys.readouterr().out


def test_handle_input_blank_line_sends_nothing(client):
    assert main.handle_input(client, "\n") is True
    assert client.method_calls == []


def test_console_listener_prints_events():
    out = io.StringIO()
    listener = main.ConsoleListener(out)

    listener(LoginResult(False, "name taken"))
    listener(UserList(("alice", "bob")))
    listener(Message(True, "bob", "hi"))
    listener(Disconnected())

    text = out.getvalue()
    assert "Login failed: name taken" in text
    assert "alice, bob" in text
    assert "bob (private): hi" in text
    assert "Disconnected" in text


def test_run_returns_1_when_connect_fails(closed_port):
    config = ClientConfig(host="127.0.0.1", port=closed_port)
    assert main.run(config, stdin=io.StringIO("")) == 1


def test_run_session_logs_in_and_sends(chat_server, capsys):
    config = ClientConfig(host=chat_server.host, port=chat_server.port, username="alice")

    assert main.run(config, stdin=io.StringIO("hello\n/quit\n")) == 0

    assert chat_server.next_line() == "login alice"
    assert chat_server.next_line() == "users"
    assert chat_server.next_line() == "msg hello"


def test_main_rejects_invalid_config(monkeypatch, capsys):
    monkeypatch.setenv("CHAT_PORT", "not-a-port")
    assert main.main() == 2
    assert "Invalid configuration" in capsys.readouterr().err


def test_console_listener_disconnect_prompts_for_enter():
    out = io.StringIO()

    main.ConsoleListener(out).on_disconnect()

    assert "press Enter to exit" in out.getvalue()
