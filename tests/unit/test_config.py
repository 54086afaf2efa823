"""Unit tests for mapping file location and bootstrapping."""

from unittest.mock import Mock

from autoinject.core.protocols import FileSystemService, Logger
from autoinject.injection import MappingStore, parse_properties
from autoinject.utils.config import (
    CONFIG_ENV_VAR,
    DEFAULT_MAPPING_PATH,
    default_mapping_content,
    default_mapping_entries,
    ensure_mapping_file,
    resolve_mapping_path,
)


class TestResolveMappingPath:
    """Test mapping path precedence."""

    def test_explicit_path_wins(self):
        assert resolve_mapping_path("custom.properties", {CONFIG_ENV_VAR: "env.properties"}) == (
            "custom.properties"
        )

    def test_environment_variable(self):
        assert resolve_mapping_path(None, {CONFIG_ENV_VAR: "env.properties"}) == "env.properties"

    def test_default_path(self):
        assert resolve_mapping_path(None, {}) == DEFAULT_MAPPING_PATH

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, "from-env.yaml")

        assert resolve_mapping_path() == "from-env.yaml"


class TestDefaultMappingContent:
    """Test the generated default mapping."""

    def test_default_entries_wire_demo_beans(self):
        assert default_mapping_entries() == {
            "autoinject.demo.SomeInterface": "autoinject.demo.SomeImpl",
            "autoinject.demo.SomeOtherInterface": "autoinject.demo.SODoer",
        }

    def test_properties_content(self):
        content = default_mapping_content("injector.properties")

        assert content.startswith("# mapping: interface = implementation\n")
        assert parse_properties(content) == default_mapping_entries()

    def test_yaml_content_round_trips(self, tmp_path):
        path = tmp_path / "injector.yaml"
        path.write_text(default_mapping_content(str(path)), encoding="utf-8")

        assert dict(MappingStore.load(path).items()) == default_mapping_entries()


class TestEnsureMappingFile:
    """Test default-file bootstrapping."""

    def setup_method(self):
        """Set up test dependencies before each test."""
        self.fs = Mock(spec=FileSystemService)
        self.logger = Mock(spec=Logger)

    def test_existing_file_is_left_alone(self):
        # Arrange
        self.fs.exists.return_value = True

        # Act
        written = ensure_mapping_file("injector.properties", self.fs, self.logger)

        # Assert
        assert written is False
        self.fs.write_file.assert_not_called()

    def test_missing_file_is_created(self):
        # Arrange
        self.fs.exists.return_value = False

        # Act
        written = ensure_mapping_file("injector.properties", self.fs, self.logger)

        # Assert
        assert written is True
        self.fs.write_file.assert_called_once_with(
            "injector.properties", default_mapping_content("injector.properties")
        )
        assert "Created default injector.properties" in self.logger.info.call_args_list[0][0][0]

    def test_force_overwrites(self):
        self.fs.exists.return_value = True

        assert ensure_mapping_file("injector.properties", self.fs, self.logger, force=True)
        self.fs.write_file.assert_called_once()
