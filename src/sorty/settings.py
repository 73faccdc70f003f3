import os
from pathlib import Path

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib  # pyright: ignore[reportMissingImports]


# Settings key constants
SETTING_LOGGING_PATH = 'logging.path'
SETTING_LOGGING_LEVEL = 'logging.level'
SETTING_CHUNK_SIZE = 'scan.chunk_size'

CONFIG_ENVIRONMENT_VARIABLE = 'SORTY_CONFIG'


class ScanSettings:
    """Read-only settings loaded from a TOML file.

    The class does not validate the schema; it only loads the document and
    resolves dotted keys. Consumers interpret the values.

    Example:
        settings = ScanSettings(Path('~/.config/sorty.toml').expanduser())
        chunk_size = settings.get(SETTING_CHUNK_SIZE, DEFAULT_CHUNK_SIZE)
    """

    def __init__(self, settings_file: Path | None = None):
        """Load settings from settings_file if it is given.

        Args:
            settings_file: Path to a TOML file. None means no settings, so every
                           get() call returns its default.

        Raises:
            FileNotFoundError: settings_file was given but does not exist
            tomllib.TOMLDecodeError: settings_file is not valid TOML
        """
        self._settings_file = settings_file
        self._settings = {}

        if settings_file is not None:
            with open(settings_file, 'rb') as f:
                self._settings = tomllib.load(f)

    @classmethod
    def locate(cls, explicit_path: str | os.PathLike | None = None) -> 'ScanSettings':
        """Load settings from explicit_path, falling back to $SORTY_CONFIG."""
        if explicit_path is None:
            explicit_path = os.environ.get(CONFIG_ENVIRONMENT_VARIABLE) or None
        if explicit_path is None:
            return cls()
        return cls(Path(explicit_path))

    @property
    def settings_file(self) -> Path | None:
        return self._settings_file

    def get(self, key: str, default=None):
        """Get a setting value by dotted key path.

        Returns default if the path does not exist or an intermediate value is
        not a table.

        Examples:
            >>> settings.get('scan.chunk_size', 65536)
            1048576
            >>> settings.get('nonexistent.key', 'fallback')
            'fallback'
        """
        keys = key.split('.')
        value = self._settings

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value
