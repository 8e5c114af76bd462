"""User configuration loaded from ``config.toml``.

Every setting is optional; the accessor methods supply the defaults.
"""

import tomllib
from dataclasses import dataclass, fields, is_dataclass
from pathlib import Path
from typing import Any, Optional, Union, get_args, get_origin

import tomli_w

from luna.paths import themes_dir

DEFAULT_HIGHLIGHT_EXTS = ("rs", "py", "js", "ts", "lua", "toml", "c", "cpp", "h", "hpp")


class ConfigError(ValueError):
    """Raised when configuration data has the wrong shape."""


# ─── Sections ────────────────────────────────────────────────────────────────


@dataclass
class CorrectorConfig:
    enabled: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    builtins: Optional[bool] = None
    system: Optional[bool] = None


@dataclass
class LinterErrorsConfig:
    enabled: Optional[bool] = None
    layout: Optional[str] = None
    commands: Optional[bool] = None
    flags: Optional[bool] = None


@dataclass
class LinterCommandsConfig:
    enabled: Optional[bool] = None
    commands: Optional[bool] = None
    flags: Optional[bool] = None
    strings: Optional[bool] = None
    number: Optional[bool] = None
    boolean: Optional[bool] = None


@dataclass
class LinterConfig:
    errors: Optional[LinterErrorsConfig] = None
    commands: Optional[LinterCommandsConfig] = None


@dataclass
class SuggestionsConfig:
    enabled: Optional[bool] = None
    commands: Optional[bool] = None
    system: Optional[bool] = None
    short_flags: Optional[bool] = None
    long_flags: Optional[bool] = None
    max_items: Optional[int] = None


@dataclass
class TabCompleteConfig:
    enabled: Optional[bool] = None
    files: Optional[bool] = None
    commands: Optional[bool] = None
    flags: Optional[bool] = None


@dataclass
class CatConfig:
    highlight: Optional[bool] = None
    highlight_exts: Optional[list[str]] = None


@dataclass
class LsConfig:
    render_table: Optional[bool] = None
    alternating_rows: Optional[bool] = None


@dataclass
class CdConfig:
    home_default: Optional[bool] = None


@dataclass
class HeadConfig:
    lines: Optional[int] = None


@dataclass
class TailConfig:
    lines: Optional[int] = None


@dataclass
class BuiltinConfig:
    enabled: Optional[bool] = None
    blocked: Optional[list[str]] = None
    allowed: Optional[list[str]] = None
    cat: Optional[CatConfig] = None
    ls: Optional[LsConfig] = None
    cd: Optional[CdConfig] = None
    head: Optional[HeadConfig] = None
    tail: Optional[TailConfig] = None


# ─── Conversion ──────────────────────────────────────────────────────────────


def _convert(tp: Any, value: Any, where: str) -> Any:
    if get_origin(tp) is Union:
        tp = next(arg for arg in get_args(tp) if arg is not type(None))

    if get_origin(tp) is list:
        (item_type,) = get_args(tp)
        if not isinstance(value, list):
            raise ConfigError(f"{where}: expected an array")
        return [_convert(item_type, item, f"{where}[{i}]") for i, item in enumerate(value)]
    if tp is bool:
        if not isinstance(value, bool):
            raise ConfigError(f"{where}: expected a boolean")
        return value
    if tp is int:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ConfigError(f"{where}: expected a non-negative integer")
        return value
    if tp is str:
        if not isinstance(value, str):
            raise ConfigError(f"{where}: expected a string")
        return value
    if is_dataclass(tp):
        if not isinstance(value, dict):
            raise ConfigError(f"{where}: expected a table")
        return _from_mapping(tp, value, where)
    raise ConfigError(f"{where}: unsupported type")


def _from_mapping(cls: type, data: dict[str, Any], where: str) -> Any:
    values = {
        f.name: _convert(f.type, data[f.name], f"{where}.{f.name}" if where else f.name)
        for f in fields(cls)
        if f.name in data
    }
    return cls(**values)


def _dump(value: Any) -> Any:
    if is_dataclass(value):
        return {
            f.name: _dump(getattr(value, f.name))
            for f in fields(value)
            if getattr(value, f.name) is not None
        }
    if isinstance(value, list):
        return list(value)
    return value


def _opt(section: Any, attr: str, default: Any) -> Any:
    if section is None:
        return default
    value = getattr(section, attr)
    return default if value is None else value


# ─── Main config ─────────────────────────────────────────────────────────────


@dataclass
class LunaConfig:
    inherit_system_env: Optional[bool] = None
    run_bashrc: Optional[bool] = None
    run_lunarc: Optional[bool] = None
    theme: Optional[str] = None
    newline: Optional[bool] = None
    universal_multi_file_parsing: Optional[bool] = None
    corrector: Optional[CorrectorConfig] = None
    linter: Optional[LinterConfig] = None
    tabcomplete: Optional[TabCompleteConfig] = None
    suggestions: Optional[SuggestionsConfig] = None
    builtin: Optional[BuiltinConfig] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LunaConfig":
        """Build a config from parsed TOML data; unknown keys are ignored."""
        if not isinstance(data, dict):
            raise ConfigError("configuration must be a table")
        return _from_mapping(cls, data, "")

    def to_dict(self) -> dict[str, Any]:
        """Return the settings that are set, as nested dictionaries."""
        return _dump(self)

    @classmethod
    def load(cls, path: Path | str) -> "LunaConfig":
        """Load a config file; a missing or invalid file gives the defaults."""
        try:
            content = Path(path).read_text(encoding="utf-8")
        except (OSError, ValueError):
            return cls()
        try:
            return cls.from_dict(tomllib.loads(content))
        except ValueError:
            return cls()

    def save(self, path: Path | str) -> None:
        """Write the config as TOML."""
        Path(path).write_text(tomli_w.dumps(self.to_dict()), encoding="utf-8")

    # --- General ---

    def should_add_newline(self) -> bool:
        return _opt(self, "newline", True)

    def should_inherit_system_env(self) -> bool:
        return _opt(self, "inherit_system_env", True)

    def should_run_bashrc(self) -> bool:
        return _opt(self, "run_bashrc", False)

    def should_run_lunarc(self) -> bool:
        return _opt(self, "run_lunarc", True)

    def is_builtin_enabled(self, name: str) -> bool:
        config = self.builtin
        if config is None:
            return True
        if not _opt(config, "enabled", True):
            return False
        if config.blocked is not None and name in config.blocked:
            return False
        if config.allowed and name not in config.allowed:
            return False
        return True

    def use_universal_multi_file_parsing(self) -> bool:
        return _opt(self, "universal_multi_file_parsing", False)

    # --- Corrector ---

    def corrector_enabled(self) -> bool:
        return _opt(self.corrector, "enabled", True)

    def corrector_min_length(self) -> int:
        return _opt(self.corrector, "min_length", 0)

    def corrector_max_length(self) -> int:
        return _opt(self.corrector, "max_length", 999)

    def corrector_builtins(self) -> bool:
        return _opt(self.corrector, "builtins", True)

    def corrector_system(self) -> bool:
        return _opt(self.corrector, "system", True)

    # --- Linter ---

    def _linter_errors(self) -> Optional[LinterErrorsConfig]:
        return self.linter.errors if self.linter else None

    def _linter_commands(self) -> Optional[LinterCommandsConfig]:
        return self.linter.commands if self.linter else None

    def linter_errors_enabled(self) -> bool:
        return _opt(self._linter_errors(), "enabled", True)

    def linter_errors_layout(self) -> str:
        return _opt(self._linter_errors(), "layout", "right")

    def linter_errors_commands(self) -> bool:
        return _opt(self._linter_errors(), "commands", True)

    def linter_errors_flags(self) -> bool:
        return _opt(self._linter_errors(), "flags", True)

    def linter_commands_enabled(self) -> bool:
        return _opt(self._linter_commands(), "enabled", True)

    def linter_commands_commands(self) -> bool:
        return _opt(self._linter_commands(), "commands", True)

    def linter_commands_flags(self) -> bool:
        return _opt(self._linter_commands(), "flags", True)

    def linter_commands_strings(self) -> bool:
        return _opt(self._linter_commands(), "strings", True)

    def linter_commands_number(self) -> bool:
        return _opt(self._linter_commands(), "number", True)

    def linter_commands_boolean(self) -> bool:
        return _opt(self._linter_commands(), "boolean", True)

    # --- Tab completion ---

    def tabcomplete_enabled(self) -> bool:
        return _opt(self.tabcomplete, "enabled", True)

    def tabcomplete_files(self) -> bool:
        return _opt(self.tabcomplete, "files", True)

    def tabcomplete_commands(self) -> bool:
        return _opt(self.tabcomplete, "commands", True)

    def tabcomplete_flags(self) -> bool:
        return _opt(self.tabcomplete, "flags", True)

    # --- Suggestions ---

    def suggestions_enabled(self) -> bool:
        return _opt(self.suggestions, "enabled", True)

    def suggestions_commands(self) -> bool:
        return _opt(self.suggestions, "commands", True)

    def suggestions_system(self) -> bool:
        return _opt(self.suggestions, "system", True)

    def suggestions_short_flags(self) -> bool:
        return _opt(self.suggestions, "short_flags", True)

    def suggestions_long_flags(self) -> bool:
        return _opt(self.suggestions, "long_flags", True)

    def suggestions_max_items(self) -> int:
        return _opt(self.suggestions, "max_items", 4)

    # --- Builtins ---

    def _builtin_section(self, name: str) -> Any:
        return getattr(self.builtin, name) if self.builtin else None

    def cat_highlight(self) -> bool:
        return _opt(self._builtin_section("cat"), "highlight", True)

    def cat_highlight_exts(self) -> list[str]:
        exts = _opt(self._builtin_section("cat"), "highlight_exts", None)
        return list(DEFAULT_HIGHLIGHT_EXTS if exts is None else exts)

    def ls_render_table(self) -> bool:
        return _opt(self._builtin_section("ls"), "render_table", True)

    def ls_alternating_rows(self) -> bool:
        return _opt(self._builtin_section("ls"), "alternating_rows", True)

    def cd_home_default(self) -> bool:
        return _opt(self._builtin_section("cd"), "home_default", True)

    def head_lines(self) -> int:
        return _opt(self._builtin_section("head"), "lines", 10)

    def tail_lines(self) -> int:
        return _opt(self._builtin_section("tail"), "lines", 10)

    # --- Theme ---

    def resolve_theme_path(self) -> Optional[Path]:
        """Return the theme file path, trying a ``.lua`` suffix when needed."""
        if self.theme is None:
            return None
        theme = self.theme
        path = Path(theme) if Path(theme).is_absolute() else themes_dir() / theme
        if path.exists():
            return path
        if not theme.endswith(".lua") and path.name:
            lua_path = path.with_suffix(".lua") if path.suffix else path.with_name(path.name + ".lua")
            if lua_path.exists():
                return lua_path
        return path