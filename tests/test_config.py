"""
Tests for fasttable.config

Environment variables are set with monkeypatch; .env loading is disabled so
the developer's own environment file cannot leak into the results.
"""

import pytest

from fasttable.config import ConfigurationError, FastTableConfig, get_config, parse_widget_list

ENV_VARS = (
    "FASTTABLE_THEME",
    "FASTTABLE_TABLE_CLASSES",
    "FASTTABLE_WIDGETS",
    "FASTTABLE_POPOVER_PLACEMENT",
    "FASTTABLE_RESOURCE_URL",
    "FASTTABLE_LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove all FASTTABLE_* variables"""
    for name in ENV_VARS:
        # setenv first so undo also removes values loaded from .env files
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


class TestGetConfig:
    """Test loading configuration from the environment"""

    def test_defaults(self, clean_env):
        """Test defaults when nothing is set"""
        config = get_config(load_env_file=False)
        assert config == FastTableConfig()
        assert config.widgets == ["filter", "columns", "zebra", "pager", "output"]

    def test_values_from_environment(self, clean_env):
        """Test every variable is read"""
        clean_env.setenv("FASTTABLE_THEME", "blue")
        clean_env.setenv("FASTTABLE_TABLE_CLASSES", "table table-hover")
        clean_env.setenv("FASTTABLE_WIDGETS", "zebra, filter")
        clean_env.setenv("FASTTABLE_POPOVER_PLACEMENT", "Bottom")
        clean_env.setenv("FASTTABLE_RESOURCE_URL", "/static/ts/")
        clean_env.setenv("FASTTABLE_LOG_LEVEL", "debug")

        config = get_config(load_env_file=False)

        assert config.theme == "blue"
        assert config.table_classes == "table table-hover"
        assert config.widgets == ["zebra", "filter"]
        assert config.popover_placement == "bottom"
        assert config.resource_base_url == "/static/ts"
        assert config.log_level == "DEBUG"

    def test_empty_widget_list(self, clean_env):
        """Test an empty variable disables all widgets"""
        clean_env.setenv("FASTTABLE_WIDGETS", "")
        assert get_config(load_env_file=False).widgets == []

    def test_env_file_loaded(self, clean_env, tmp_path):
        """Test values are read from a .env file in the working directory"""
        (tmp_path / ".env").write_text("FASTTABLE_THEME=dropbox\n", encoding="utf-8")
        clean_env.chdir(tmp_path)

        assert get_config().theme == "dropbox"

    @pytest.mark.parametrize(
        "name, value",
        [
            ("FASTTABLE_THEME", "blue theme"),
            ("FASTTABLE_WIDGETS", "filter,<script>"),
            ("FASTTABLE_POPOVER_PLACEMENT", "middle"),
            ("FASTTABLE_TABLE_CLASSES", 'table" onclick="x'),
            ("FASTTABLE_LOG_LEVEL", "VERBOSE"),
        ],
    )
    def test_invalid_values_fail_fast(self, clean_env, name, value):
        """Test invalid values raise ConfigurationError"""
        clean_env.setenv(name, value)
        with pytest.raises(ConfigurationError, match=name):
            get_config(load_env_file=False)


class TestFastTableConfig:
    """Test the config dataclass"""

    def test_to_table_options(self):
        """Test conversion to rendering options"""
        config = FastTableConfig(theme="blue", widgets=["zebra"], popover_placement="left", resource_base_url="/ts")
        options = config.to_table_options()

        assert options.theme == "blue"
        assert options.widgets == ["zebra"]
        assert options.popover_default_placement == "left"
        assert options.resource_base_url == "/ts"
        assert options.table_classes == "table"

    def test_options_do_not_share_widget_list(self):
        """Test options get their own copy of the widget list"""
        config = FastTableConfig()
        config.to_table_options().widgets.clear()
        assert config.widgets

    def test_direct_construction_validates(self):
        """Test validation also runs for direct construction"""
        with pytest.raises(ConfigurationError):
            FastTableConfig(popover_placement="centre")


class TestParseWidgetList:
    """Test widget list parsing"""

    def test_whitespace_and_blanks(self):
        """Test surrounding spaces and empty entries are dropped"""
        assert parse_widget_list(" filter , ,zebra,") == ["filter", "zebra"]

    def test_duplicates(self):
        """Test repeated names are dropped"""
        assert parse_widget_list("pager,pager") == ["pager"]
