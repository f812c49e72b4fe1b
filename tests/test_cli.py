import pytest

from zen_gomoku.cli import build_config, build_session, create_parser, parse_move
from zen_gomoku.core.models import Player
from zen_gomoku.oracle.llm_oracle import LLMMoveOracle
from zen_gomoku.oracle.random_oracle import RandomMoveOracle


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("ZEN_GOMOKU_CONFIG", "ZEN_GOMOKU_MODEL", "ZEN_GOMOKU_ENDPOINT", "ZEN_GOMOKU_API_KEY_ENV", "OPENAI_API_KEY"):
        monkeypatch.delenv(name, raising=False)


@pytest.mark.parametrize(
    "text,expected",
    [("7 7", (7, 7)), ("7,8", (7, 8)), (" 14 , 0 ", (14, 0)), ("7", None), ("a b", None), ("-1 3", None)],
)
def test_parse_move(text, expected):
    assert parse_move(text) == expected


def test_flags_override_config():
    args = create_parser().parse_args(["--ai-color", "black", "--think-delay", "0", "--seed", "3", "--human"])
    config = build_config(args)

    assert config.oracle_player == "black"
    assert config.think_delay == 0
    assert config.seed == 3
    assert config.ai_mode is False


def test_session_without_api_key_uses_random_oracle():
    args = create_parser().parse_args(["--ai-color", "black"])
    session = build_session(build_config(args))

    assert isinstance(session.oracle, RandomMoveOracle)
    assert session.oracle_player == Player.BLACK
    assert session.ai_mode


def test_session_with_api_key_uses_llm_oracle(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    args = create_parser().parse_args(["--model", "gpt-4o"])
    session = build_session(build_config(args))

    assert isinstance(session.oracle, LLMMoveOracle)
    assert session.oracle.oracle_id == "gpt-4o"
    assert session.oracle.llm_client.model == "gpt-4o"
