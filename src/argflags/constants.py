from __future__ import annotations

"""Token prefixes and separators shared by the tokenizer and the CLI."""

# A token starting with this prefix names a long flag (``--verbose``).
LONG_PREFIX: str = '--'

# A token starting with this prefix (and longer than it) names a short flag.
SHORT_PREFIX: str = '-'

# Inline value separator, honored for long flags only (``--name=value``).
VALUE_SEPARATOR: str = '='

# Separates the CLI's own options from the tokens it parses.
END_OF_OPTIONS: str = '--'
