"""Tests for configuration loading."""

from pathlib import Path

from chatterbox.config import DATA_DIR, Config, load_config


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "nope.conf")
        assert config == Config()
        assert config.data_path == DATA_DIR / "tasks.txt"

    def test_reads_values(self, tmp_path):
        conf = tmp_path / "chatterbox.conf"
        conf.write_text(
            "# Chatterbox settings\n"
            "\n"
            "DATA_FILE=~/tasks/list.txt\n"
            'BOT_NAME="Jeeves" # the butler\n'
            "DATE_DISPLAY_FORMAT='%d %b %Y %H:%M'\n"
            "LOG_LEVEL=debug # noisy\n"
            "TELEGRAM_BOT_TOKEN=abc:123\n"
            "TELEGRAM_ALLOWED_USERS=42, 7\n"
        )

        config = load_config(conf)

        assert config.data_path == Path.home() / "tasks" / "list.txt"
        assert config.bot_name == "Jeeves"
        assert config.date_display_format == "%d %b %Y %H:%M"
        assert config.log_level == "DEBUG"
        assert config.telegram_bot_token == "abc:123"
        assert config.telegram_allowed_users == [42, 7]

    def test_ignores_unknown_and_malformed_lines(self, tmp_path):
        conf = tmp_path / "chatterbox.conf"
        conf.write_text("SOMETHING_ELSE=1\nnot a setting\nBOT_NAME=Ada\n")

        config = load_config(conf)

        assert config.bot_name == "Ada"

    def test_skips_bad_user_ids(self, tmp_path):
        conf = tmp_path / "chatterbox.conf"
        conf.write_text("TELEGRAM_ALLOWED_USERS=1,bob,,3\n")

        assert load_config(conf).telegram_allowed_users == [1, 3]
