# luna

Building blocks for an interactive shell with rich, themeable terminal output.

## Modules

- `luna.markup`: a small tag language for coloured terminal text.
  `render_ansi("<red>hello</red> <bold>world</bold>")` turns markup into ANSI
  escape sequences, and `strip_ansi` returns only the plain text.
  Supported tags:
  - named colours (`<red>`, `<brightblue>`, `<grey>`, …) and hex colours (`<#ff4444>`, `<#f44>`);
  - backgrounds such as `<bg:blue>` or `<bg:#1e1e2e>`, closed by `</bg>`;
  - `</color>` pops the last foreground colour;
  - `<bold>`, `<italic>`, `<underline>`, `<strike>` and `<reset>`;
  - `<gradient from=#ff0000 to=#0000ff>…</gradient>`.

  Unrecognised tags are kept as literal text. `update_theme_vars` registers
  theme colours such as `color_primary`. After that, `<primary>` or
  `<color_primary>` resolve to them. `named_color` and `parse_hex_color` are
  available on their own.
- `luna.output`: `print_stdout`, `print_stderr` and `println_stdout` render markup and write it to the standard streams.
- `luna.table.Table`: column-aligned tables. Column widths come from the visible width of each cell, so markup does not count. Rows can alternate backgrounds (`alternating_rows=True`).
- `luna.overlay`: `Tip` (an inline dimmed hint) and `SuggestionBox` (a bordered list drawn below the input line). `OverlayManager.render_all(line)` draws both kinds for one input line.
- `luna.prompt`: `render_prompt(theme, context)` and `render_error(theme, context, err)`. The theme is any object with `render_prompt(context)` and `render_error(context, message)` methods returning markup or `None`. Without a theme, or when the theme returns nothing, both fall back to built-in defaults.
- `luna.highlight.SyntaxHighlighter`: colours a command line as it is typed. It marks commands, flags, quoted strings, numbers, booleans and operators. Unknown commands, unterminated strings and flags that a built-in command does not accept are shown in red. Build it with a mapping from built-in command names to their flags; each flag needs a `name` and a `short` attribute.
- `luna.config.LunaConfig`: the TOML configuration. Every setting is optional, and each accessor method (`corrector_max_length()`, `suggestions_max_items()`, `head_lines()`, …) returns the default when the setting is missing. It also provides `from_dict`, `to_dict`, `load`, `save` and `resolve_theme_path`.
- `luna.context.ShellContext`: a snapshot of shell state (cwd, user, host name, pid, local date and time, environment and variables), built with `ShellContext.create(...)`.
- `luna.utils`: `expand_aliases`, `expand_braces`, `expand_paths` (braces and globs), `damerau_levenshtein` and `suggest_commands`. `suggest_commands` returns up to three "did you mean" matches within edit distance 2, taken from built-ins, aliases and `PATH`.
- `luna.corrector`: `split_segments` splits a line at `|`, `&&`, `||` and `;`. `build_correction_options` returns `MenuOption`s that correct the first unknown command in a line; the first option is the cancel entry.
- `luna.platform`: `get_hostname`, `get_timezone_offset` and `get_file_metadata`.
- `luna.paths`: locations of the user directory `$HOME/.luna` and of the config file, history file, themes directory and plugins directory inside it.

## Example

```python
from luna.markup import render_ansi
from luna.table import Table

table = Table(["name", "size"])
table.add_row(["<green>README.md</green>", "1.2K"])
print(render_ansi(table.render()))
```

## Configuration

`LunaConfig.load(path)` reads a TOML file. If the file is missing or unreadable, or does not parse as a valid configuration, you get the default configuration. An example file:

```toml
theme = "default"
newline = true

[corrector]
max_length = 20

[suggestions]
max_items = 4
```

`resolve_theme_path()` looks up a relative theme name in `~/.luna/themes` and tries a `.lua` suffix if the name alone does not exist.

## What it does not do

This package does not give you a working shell. There is no command to start, no line editor or input loop, no parser or command execution, and no built-in commands. It also does not run theme or plugin scripts. It supplies the rendering, configuration, context and correction pieces that such a program would use. The caller provides the theme object and the table of built-in commands.

## Tests

```
pip install -e .[test]
pytest
```