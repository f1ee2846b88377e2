"""Constants."""

VERSION = "0.2"
AUTHOR = "Dale Hitchenor"
SOURCE_URL = "https://github.com/dhitchenor/rper"

# Low 9 bits: rwx for user, group, other
PERMISSION_MASK = 0o777

MODE_SPEC_WILDCARD = "*"
MODE_SPEC_ALPHABET = frozenset("4567" + MODE_SPEC_WILDCARD)
MODE_SPEC_LENGTH = 3

MODE_SPEC_HINT = "web search: unix octal permissions"

ABOUT_TEXT = f"""\
|============== ABOUT RPER =================|
  rper (pronounced: 'arr per')
  'recursive permissions'
  Version: {VERSION}

  Author: {AUTHOR}
  Source: {SOURCE_URL}"""
